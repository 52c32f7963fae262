"""Settings domain service."""

import logging
from dataclasses import replace
from datetime import date
from typing import Optional

from coinwallet.domain.entities import AppData, Settings
from coinwallet.domain.repository import WalletRepository
from coinwallet.domain.schema import normalize_settings, settings_to_dict

logger = logging.getLogger(__name__)


def sync_legacy_goals(settings: Settings) -> Settings:
    """Mirror tiered primary goals into the legacy fields, then normalize.

    Once a tiered primary goal is set, the legacy fields are replaced
    outright so they cannot disagree with it.
    """
    if settings.primary_goal is not None or settings.primary_goals is not None:
        settings = replace(
            settings,
            daily_goal=settings.primary_goal,
            daily_goals=settings.primary_goals,
        )
    return normalize_settings(settings_to_dict(settings))


def replace_settings(data: AppData, settings: Settings) -> AppData:
    """Return ``data`` with its settings replaced wholesale."""
    return replace(data, settings=sync_legacy_goals(settings))


class SettingsService:
    """Service for saving settings."""

    def __init__(self, repository: WalletRepository):
        """Initialize settings service.

        Args:
            repository: Wallet repository
        """
        self.repository = repository

    def save_settings(self, data: AppData, settings: Settings) -> AppData:
        """Replace and persist settings.

        Returns:
            Wallet data with the new settings
        """
        new_data = replace_settings(data, settings)
        self.repository.save(new_data)
        logger.info("Saved settings")
        self.repository.notify()
        return new_data

    def reset_debt(self, data: AppData, today: Optional[date] = None) -> AppData:
        """Start debt accrual over from ``today``.

        Returns:
            Wallet data with the debt reset date set
        """
        if today is None:
            today = date.today()
        new_data = self.save_settings(data, replace(data.settings, debt_reset_date=today))
        logger.info("Debt reset as of %s", today.isoformat())
        return new_data
