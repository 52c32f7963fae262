"""Domain model entities for coinwallet.

These are pure data classes representing the wallet ledger, independent of
how the data is persisted. The JSON shape used for storage and
import/export lives in ``coinwallet.domain.schema``.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


class RecordMode(str, Enum):
    """User-declared category of a balance change."""

    ADD = "add"
    PREMIUM = "premium"
    OTHER = "other"
    SEREBO = "serebo"
    PICK = "pick"

    @property
    def is_spend(self) -> bool:
        return self is not RecordMode.ADD


class GoalTier(str, Enum):
    """Daily goal tier."""

    PRIMARY = "primary"
    SECONDARY = "secondary"


# Stretch amount applied when no secondary goal is configured
DEFAULT_SECONDARY_OFFSET = 100

WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


@dataclass(frozen=True)
class CoinRecord:
    """One logged balance-change event.

    ``coin_amount`` is the balance snapshot after the event. Exactly one of
    the category fields is non-zero for records written by the ledger.
    """

    id: str
    date: date
    timestamp: int
    coin_amount: int
    earned: int = 0
    premium_box: int = 0
    other: int = 0
    serebo: int = 0
    pick: int = 0
    primary_goal_at_that_day: Optional[int] = None
    secondary_goal_at_that_day: Optional[int] = None

    @property
    def sort_key(self) -> tuple[date, int]:
        return (self.date, self.timestamp)

    @property
    def spent(self) -> int:
        return self.premium_box + self.other + self.serebo + self.pick

    @property
    def mode(self) -> Optional[RecordMode]:
        """Category the record was written under, if any is non-zero."""
        if self.earned:
            return RecordMode.ADD
        if self.premium_box:
            return RecordMode.PREMIUM
        if self.other:
            return RecordMode.OTHER
        if self.serebo:
            return RecordMode.SEREBO
        if self.pick:
            return RecordMode.PICK
        return None


@dataclass(frozen=True)
class OcrCrop:
    """Screenshot crop region in percent, kept for the OCR reader."""

    left: Optional[float] = None
    top: Optional[float] = None
    right: Optional[float] = None
    bottom: Optional[float] = None


@dataclass(frozen=True)
class Settings:
    """Canonical settings.

    Carries both the tiered goal fields and the legacy ``daily_goal`` /
    ``daily_goals`` fields so older readers of exported data keep working.
    Weekday tuples are indexed with 0 = Sunday.
    """

    primary_goal: Optional[int] = None
    primary_goals: Optional[tuple[int, ...]] = None
    secondary_goal: Optional[int] = None
    secondary_goals: Optional[tuple[int, ...]] = None
    daily_goal: Optional[int] = None
    daily_goals: Optional[tuple[int, ...]] = None
    show_goal_line: bool = True
    show_debt: bool = True
    debt_reset_date: Optional[date] = None
    ocr_crop: Optional[OcrCrop] = None


@dataclass(frozen=True)
class AppData:
    """Whole persisted wallet state."""

    initial_coin_amount: int
    records: tuple[CoinRecord, ...] = ()
    settings: Settings = field(default_factory=Settings)


@dataclass(frozen=True)
class CategoryTotals:
    """Summed category magnitudes over a set of records."""

    earned: int = 0
    premium_box: int = 0
    other: int = 0
    serebo: int = 0
    pick: int = 0

    @property
    def spent(self) -> int:
        return self.premium_box + self.other + self.serebo + self.pick

    @property
    def has_activity(self) -> bool:
        return self.earned > 0 or self.spent > 0


@dataclass(frozen=True)
class DailyStats:
    """Category totals for one calendar day."""

    date: date
    totals: CategoryTotals


@dataclass(frozen=True)
class PeriodStats:
    """Category totals for a week or a month."""

    label: str
    start_date: date
    end_date: date
    totals: CategoryTotals


@dataclass(frozen=True)
class UsageShare:
    """Amount spent in one spending category and its share of all spending."""

    mode: RecordMode
    amount: int
    percentage: float


@dataclass(frozen=True)
class GoalPoint:
    """Earned amount against the day's primary goal."""

    date: date
    earned: int
    goal: int

    @property
    def reached(self) -> bool:
        return self.goal > 0 and self.earned >= self.goal


@dataclass(frozen=True)
class TodaySummary:
    """Progress for the current day."""

    date: date
    earned: int
    primary_goal: int
    secondary_goal: int
    balance: int
    debt: int

    @property
    def remaining_primary(self) -> int:
        return max(0, self.primary_goal - self.earned)

    @property
    def remaining_secondary(self) -> int:
        return max(0, self.secondary_goal - self.earned)

    @property
    def target_balance(self) -> int:
        return self.balance + self.remaining_primary
