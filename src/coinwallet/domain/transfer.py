"""Import and export of wallet data."""

import logging
from datetime import datetime
from typing import Optional

from coinwallet.domain.entities import AppData
from coinwallet.domain.repository import WalletRepository
from coinwallet.domain.schema import export_data, import_data

logger = logging.getLogger(__name__)


def default_export_filename(now: Optional[datetime] = None) -> str:
    """Return a timestamped export file name."""
    if now is None:
        now = datetime.now()
    return f"coinwallet-{now:%Y%m%d-%H%M%S}.json"


class TransferService:
    """Service for exporting and importing wallet data."""

    def __init__(self, repository: WalletRepository):
        """Initialize transfer service.

        Args:
            repository: Wallet repository
        """
        self.repository = repository

    def export_text(self, data: AppData) -> str:
        """Serialize wallet data as pretty-printed JSON."""
        return export_data(data)

    def import_text(self, text: str) -> AppData:
        """Validate JSON text and replace the stored wallet data with it.

        Nothing is saved unless the whole document is valid.

        Returns:
            Imported wallet data

        Raises:
            SchemaError: If the document is malformed
        """
        data = import_data(text)
        self.repository.save(data)
        logger.info("Imported %s records", len(data.records))
        self.repository.notify()
        return data
