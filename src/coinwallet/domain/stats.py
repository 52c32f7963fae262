"""Aggregation of ledger records into daily, weekly and monthly totals."""

from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from dateutil.relativedelta import relativedelta

from coinwallet.domain.debt import calculate_debt
from coinwallet.domain.entities import (
    AppData,
    CategoryTotals,
    CoinRecord,
    DailyStats,
    GoalPoint,
    GoalTier,
    PeriodStats,
    RecordMode,
    TodaySummary,
    UsageShare,
)
from coinwallet.domain.goals import resolve_goal, resolve_record_goal
from coinwallet.domain.ledger import get_last_coin_amount, sorted_records


def calculate_total_stats(records: Iterable[CoinRecord]) -> CategoryTotals:
    """Sum every category over records."""
    earned = premium_box = other = serebo = pick = 0
    for record in records:
        earned += record.earned
        premium_box += record.premium_box
        other += record.other
        serebo += record.serebo
        pick += record.pick
    return CategoryTotals(
        earned=earned,
        premium_box=premium_box,
        other=other,
        serebo=serebo,
        pick=pick,
    )


def group_records_by_day(records: Iterable[CoinRecord]) -> dict[date, list[CoinRecord]]:
    """Group records by day, each group in logical order."""
    grouped: dict[date, list[CoinRecord]] = {}
    for record in sorted_records(records):
        grouped.setdefault(record.date, []).append(record)
    return grouped


def calculate_daily_stats(records: Iterable[CoinRecord]) -> list[DailyStats]:
    """Totals per day with records, oldest first."""
    return [
        DailyStats(date=day, totals=calculate_total_stats(day_records))
        for day, day_records in group_records_by_day(records).items()
    ]


def week_start(day: date) -> date:
    """Monday of the week containing day."""
    return day - timedelta(days=day.weekday())


def calculate_weekly_stats(records: Sequence[CoinRecord]) -> list[PeriodStats]:
    """Totals per Monday-start week, oldest first.

    Weeks between the first and last record without any activity are
    left out.
    """
    if not records:
        return []

    first = week_start(min(r.date for r in records))
    last = max(r.date for r in records)
    by_week: dict[date, list[CoinRecord]] = {}
    for record in records:
        by_week.setdefault(week_start(record.date), []).append(record)

    result = []
    start = first
    while start <= last:
        end = start + timedelta(days=6)
        totals = calculate_total_stats(by_week.get(start, []))
        if totals.has_activity:
            result.append(
                PeriodStats(
                    label=f"{start.month}/{start.day} - {end.month}/{end.day}",
                    start_date=start,
                    end_date=end,
                    totals=totals,
                )
            )
        start += timedelta(days=7)
    return result


def calculate_monthly_stats(records: Iterable[CoinRecord]) -> list[PeriodStats]:
    """Totals per calendar month, newest first."""
    by_month: dict[date, list[CoinRecord]] = {}
    for record in records:
        by_month.setdefault(record.date.replace(day=1), []).append(record)

    result = []
    for start in sorted(by_month, reverse=True):
        end = start + relativedelta(months=1) - timedelta(days=1)
        result.append(
            PeriodStats(
                label=start.strftime("%Y-%m"),
                start_date=start,
                end_date=end,
                totals=calculate_total_stats(by_month[start]),
            )
        )
    return result


def usage_breakdown(records: Iterable[CoinRecord]) -> list[UsageShare]:
    """Spending per spending category with its share of all spending."""
    totals = calculate_total_stats(records)
    amounts = (
        (RecordMode.PREMIUM, totals.premium_box),
        (RecordMode.SEREBO, totals.serebo),
        (RecordMode.PICK, totals.pick),
        (RecordMode.OTHER, totals.other),
    )
    spent = totals.spent
    return [
        UsageShare(
            mode=mode,
            amount=amount,
            percentage=(amount / spent * 100) if spent else 0.0,
        )
        for mode, amount in amounts
    ]


def goal_series(data: AppData, end: Optional[date] = None, days: int = 7) -> list[GoalPoint]:
    """Earned vs. primary goal for the ``days`` days ending at ``end``.

    Days with records use the goal frozen on their first record; days
    without records use the goal from the current settings.
    """
    if end is None:
        end = date.today()
    grouped = group_records_by_day(data.records)

    points = []
    for offset in range(days - 1, -1, -1):
        day = end - timedelta(days=offset)
        day_records = grouped.get(day, [])
        if day_records:
            goal = resolve_record_goal(GoalTier.PRIMARY, day_records[0], data.settings)
        else:
            goal = resolve_goal(GoalTier.PRIMARY, day, data.settings)
        points.append(
            GoalPoint(date=day, earned=sum(r.earned for r in day_records), goal=goal)
        )
    return points


def today_summary(data: AppData, today: Optional[date] = None) -> TodaySummary:
    """Today's earnings against today's goals, with balance and debt."""
    if today is None:
        today = date.today()
    return TodaySummary(
        date=today,
        earned=sum(r.earned for r in data.records if r.date == today),
        primary_goal=resolve_goal(GoalTier.PRIMARY, today, data.settings),
        secondary_goal=resolve_goal(GoalTier.SECONDARY, today, data.settings),
        balance=get_last_coin_amount(data),
        debt=calculate_debt(data.records, data.settings, today),
    )
