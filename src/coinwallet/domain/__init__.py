"""Domain layer for coinwallet application."""

from coinwallet.domain.ledger import LedgerService
from coinwallet.domain.repository import WalletRepository
from coinwallet.domain.settings import SettingsService
from coinwallet.domain.transfer import TransferService
from coinwallet.domain.undo import SessionUndoStack, UndoService

__all__ = [
    "LedgerService",
    "WalletRepository",
    "SettingsService",
    "TransferService",
    "SessionUndoStack",
    "UndoService",
]
