"""Daily goal resolution across settings generations.

Settings have gone through three shapes: a single ``daily_goal``, a
per-weekday ``daily_goals`` list, and the current two-tier
primary/secondary scheme. Resolution never fails; missing configuration
resolves to 0 (primary) or primary + 100 (secondary).
"""

import logging
from datetime import date
from typing import Optional, Sequence

from coinwallet.domain.entities import (
    DEFAULT_SECONDARY_OFFSET,
    CoinRecord,
    GoalTier,
    Settings,
)

logger = logging.getLogger(__name__)


def weekday_index(day: date) -> int:
    """Return weekday index with 0 = Sunday."""
    return day.isoweekday() % 7


def _from_weekdays(values: Optional[Sequence[int]], day: date) -> Optional[int]:
    if values is not None and len(values) == 7:
        return values[weekday_index(day)]
    return None


def resolve_goal(tier: GoalTier, day: date, settings: Optional[Settings]) -> int:
    """Resolve the goal in effect for ``day``.

    Args:
        tier: Goal tier to resolve
        day: Calendar day
        settings: Settings snapshot, or None when nothing is configured

    Returns:
        Goal value (never fails)
    """
    if settings is None:
        settings = Settings()

    if tier is GoalTier.SECONDARY:
        value = _from_weekdays(settings.secondary_goals, day)
        if value is None:
            value = settings.secondary_goal
        if value is None:
            value = resolve_goal(GoalTier.PRIMARY, day, settings) + DEFAULT_SECONDARY_OFFSET
        return value

    for candidate in (
        _from_weekdays(settings.primary_goals, day),
        settings.primary_goal,
        _from_weekdays(settings.daily_goals, day),
        settings.daily_goal,
    ):
        if candidate is not None:
            return candidate
    return 0


def resolve_record_goal(
    tier: GoalTier, record: CoinRecord, settings: Optional[Settings]
) -> int:
    """Resolve the goal for a record's day.

    A goal frozen on the record at write time always wins, even when the
    current settings say otherwise. Only records without a frozen value
    (older or imported data) are resolved against ``settings``.
    """
    if tier is GoalTier.PRIMARY:
        frozen = record.primary_goal_at_that_day
    else:
        frozen = record.secondary_goal_at_that_day
    if frozen is not None:
        return frozen
    logger.debug("Record %s has no frozen %s goal, resolving live", record.id, tier.value)
    return resolve_goal(tier, record.date, settings)
