"""Debt accrual.

Debt is the shortfall of daily earnings against the primary goal, carried
forward from day to day. Surplus days repay earlier debt but never build
credit.
"""

import logging
from datetime import date
from typing import Iterable, Optional

from coinwallet.domain.entities import CoinRecord, GoalTier, Settings
from coinwallet.domain.goals import resolve_record_goal
from coinwallet.domain.ledger import sorted_records

logger = logging.getLogger(__name__)


def daily_earnings_and_goals(
    records: Iterable[CoinRecord],
    settings: Optional[Settings],
    today: date,
) -> list[tuple[date, int, int]]:
    """Collect ``(day, earned, primary goal)`` for days that count toward debt.

    Today never counts, nor does anything before the debt reset date. The
    day's goal comes from the chronologically last record of that day.
    """
    reset = settings.debt_reset_date if settings is not None else None
    days: dict[date, list[int]] = {}
    for record in sorted_records(records):
        if record.date >= today:
            continue
        if reset is not None and record.date < reset:
            continue
        entry = days.setdefault(record.date, [0, 0])
        entry[0] += record.earned
        entry[1] = resolve_record_goal(GoalTier.PRIMARY, record, settings)
    return [(day, earned, goal) for day, (earned, goal) in sorted(days.items())]


def calculate_debt(
    records: Iterable[CoinRecord],
    settings: Optional[Settings],
    today: Optional[date] = None,
) -> int:
    """Calculate the current debt.

    Args:
        records: Ledger records in any order
        settings: Current settings
        today: Day treated as in progress (defaults to the local date)

    Returns:
        Debt, never negative
    """
    if today is None:
        today = date.today()

    debt = 0
    for day, earned, goal in daily_earnings_and_goals(records, settings, today):
        if earned < goal:
            debt += goal - earned
        else:
            debt = max(0, debt - (earned - goal))
        logger.debug("%s earned=%s goal=%s debt=%s", day.isoformat(), earned, goal, debt)
    return max(0, debt)
