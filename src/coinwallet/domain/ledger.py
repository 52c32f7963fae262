"""Ledger domain service.

Records are derived from balance readings: the user reports the balance
after an event plus the event's category, and the record stores the
absolute difference to the previous balance in that category's field.
"""

import logging
import time
import uuid
from datetime import date
from typing import Iterable, Optional

from coinwallet.domain.entities import AppData, CoinRecord, GoalTier, RecordMode
from coinwallet.domain.errors import (
    DateOrderError,
    InvalidAmountError,
    NonNegativeSpendError,
    NonPositiveEarningError,
    date_before_last_record,
    earning_requires_increase,
    negative_amount,
    spending_requires_decrease,
)
from coinwallet.domain.goals import resolve_goal
from coinwallet.domain.repository import WalletRepository
from coinwallet.domain.undo import SessionUndoStack

logger = logging.getLogger(__name__)

# Category field written for each mode
MODE_FIELDS = {
    RecordMode.ADD: "earned",
    RecordMode.PREMIUM: "premium_box",
    RecordMode.OTHER: "other",
    RecordMode.SEREBO: "serebo",
    RecordMode.PICK: "pick",
}


def now_ms() -> int:
    """Current time in milliseconds since the epoch."""
    return int(time.time() * 1000)


def sorted_records(records: Iterable[CoinRecord]) -> list[CoinRecord]:
    """Return records in logical ``(date, timestamp)`` order."""
    return sorted(records, key=lambda r: r.sort_key)


def get_last_record(data: AppData) -> Optional[CoinRecord]:
    """Return the most recently written record (max timestamp), or None."""
    if not data.records:
        return None
    return max(data.records, key=lambda r: (r.timestamp, r.date))


def get_last_coin_amount(data: AppData) -> int:
    """Return the current balance."""
    last = get_last_record(data)
    if last is None:
        return data.initial_coin_amount
    return last.coin_amount


def get_last_record_date(data: AppData) -> Optional[date]:
    last = get_last_record(data)
    return last.date if last is not None else None


def get_last_record_timestamp(data: AppData) -> Optional[int]:
    last = get_last_record(data)
    return last.timestamp if last is not None else None


def generate_id(timestamp: int) -> str:
    return f"{timestamp}-{uuid.uuid4().hex[:7]}"


def build_record(
    data: AppData,
    record_date: date,
    new_coin_amount: int,
    mode: RecordMode,
    timestamp: Optional[int] = None,
) -> CoinRecord:
    """Validate a balance reading and build the record for it.

    Args:
        data: Current wallet data
        record_date: Day the event is assigned to
        new_coin_amount: Balance after the event
        mode: Declared category
        timestamp: Creation time in ms (defaults to now)

    Returns:
        The new record; ``data`` is not modified

    Raises:
        InvalidAmountError: If new_coin_amount is negative
        DateOrderError: If record_date precedes the last record's date
        NonPositiveEarningError: If mode is add and the balance did not grow
        NonNegativeSpendError: If mode is a spend and the balance did not shrink
    """
    mode = RecordMode(mode)
    if new_coin_amount < 0:
        raise InvalidAmountError(negative_amount(new_coin_amount))

    last = get_last_record(data)
    last_coin = last.coin_amount if last is not None else data.initial_coin_amount
    diff = new_coin_amount - last_coin

    if last is not None and record_date < last.date:
        raise DateOrderError(date_before_last_record(record_date, last.date))
    if mode is RecordMode.ADD and diff <= 0:
        raise NonPositiveEarningError(earning_requires_increase(diff))
    if mode.is_spend and diff >= 0:
        raise NonNegativeSpendError(spending_requires_decrease(mode.value, diff))

    if timestamp is None:
        timestamp = now_ms()
    if last is not None and timestamp <= last.timestamp:
        # Keep creation order strict for records written in the same ms
        timestamp = last.timestamp + 1

    return CoinRecord(
        id=generate_id(timestamp),
        date=record_date,
        timestamp=timestamp,
        coin_amount=new_coin_amount,
        primary_goal_at_that_day=resolve_goal(GoalTier.PRIMARY, record_date, data.settings),
        secondary_goal_at_that_day=resolve_goal(
            GoalTier.SECONDARY, record_date, data.settings
        ),
        **{MODE_FIELDS[mode]: abs(diff)},
    )


def append_record(data: AppData, record: CoinRecord) -> AppData:
    """Return ``data`` with ``record`` appended."""
    return AppData(
        initial_coin_amount=data.initial_coin_amount,
        records=data.records + (record,),
        settings=data.settings,
    )


class LedgerService:
    """Service for adding records to the ledger."""

    def __init__(self, repository: WalletRepository, undo_stack: SessionUndoStack):
        """Initialize ledger service.

        Args:
            repository: Wallet repository
            undo_stack: Current session's undo stack
        """
        self.repository = repository
        self.undo_stack = undo_stack

    def add_record(
        self,
        data: AppData,
        record_date: date,
        new_coin_amount: int,
        mode: RecordMode,
        timestamp: Optional[int] = None,
    ) -> AppData:
        """Validate, append and persist a record.

        The record id is pushed onto the session undo stack after the
        wallet has been saved. A rejected reading leaves the store untouched.

        Returns:
            New wallet data including the record

        Raises:
            ValidationError: See ``build_record``
        """
        record = build_record(data, record_date, new_coin_amount, mode, timestamp)
        new_data = append_record(data, record)
        self.repository.save(new_data)
        self.undo_stack.push(record.id)
        logger.info(
            "Added %s record %s on %s: balance %s",
            RecordMode(mode).value,
            record.id,
            record.date.isoformat(),
            record.coin_amount,
        )
        return new_data
