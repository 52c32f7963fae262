"""Tests for daily goal resolution."""

from datetime import date

from coinwallet.domain.entities import GoalTier, Settings
from coinwallet.domain.goals import resolve_goal, resolve_record_goal, weekday_index

WEDNESDAY = date(2024, 1, 3)
SATURDAY = date(2024, 1, 6)
SUNDAY = date(2024, 1, 7)


def test_weekday_index_starts_on_sunday():
    assert weekday_index(SUNDAY) == 0
    assert weekday_index(WEDNESDAY) == 3
    assert weekday_index(SATURDAY) == 6


def test_primary_weekday_goals():
    settings = Settings(primary_goals=(0, 100, 100, 100, 100, 100, 200))

    assert resolve_goal(GoalTier.PRIMARY, WEDNESDAY, settings) == 100
    assert resolve_goal(GoalTier.PRIMARY, SATURDAY, settings) == 200
    assert resolve_goal(GoalTier.PRIMARY, SUNDAY, settings) == 0


def test_primary_weekday_goals_win_over_scalar():
    settings = Settings(primary_goal=999, primary_goals=(1, 2, 3, 4, 5, 6, 7))

    assert resolve_goal(GoalTier.PRIMARY, WEDNESDAY, settings) == 4


def test_primary_weekday_goals_with_wrong_length_are_ignored():
    settings = Settings(primary_goal=300, primary_goals=(1, 2, 3))

    assert resolve_goal(GoalTier.PRIMARY, WEDNESDAY, settings) == 300


def test_primary_falls_back_to_legacy_weekday_goals():
    settings = Settings(daily_goals=(10, 20, 30, 40, 50, 60, 70), daily_goal=5)

    assert resolve_goal(GoalTier.PRIMARY, SATURDAY, settings) == 70


def test_primary_falls_back_to_legacy_scalar():
    settings = Settings(daily_goal=250)

    assert resolve_goal(GoalTier.PRIMARY, WEDNESDAY, settings) == 250


def test_tiered_scalar_wins_over_legacy_weekday_goals():
    settings = Settings(primary_goal=400, daily_goals=(1, 1, 1, 1, 1, 1, 1))

    assert resolve_goal(GoalTier.PRIMARY, WEDNESDAY, settings) == 400


def test_primary_defaults_to_zero():
    assert resolve_goal(GoalTier.PRIMARY, WEDNESDAY, Settings()) == 0
    assert resolve_goal(GoalTier.PRIMARY, WEDNESDAY, None) == 0


def test_secondary_defaults_to_primary_plus_100():
    settings = Settings(primary_goals=(0, 100, 100, 100, 100, 100, 200))

    assert resolve_goal(GoalTier.SECONDARY, WEDNESDAY, settings) == 200
    assert resolve_goal(GoalTier.SECONDARY, SATURDAY, settings) == 300
    assert resolve_goal(GoalTier.SECONDARY, WEDNESDAY, None) == 100


def test_secondary_scalar_and_weekday_goals():
    settings = Settings(
        primary_goal=500,
        secondary_goal=800,
        secondary_goals=(0, 0, 0, 900, 0, 0, 1200),
    )

    assert resolve_goal(GoalTier.SECONDARY, WEDNESDAY, settings) == 900
    assert resolve_goal(GoalTier.SECONDARY, SATURDAY, settings) == 1200

    scalar_only = Settings(primary_goal=500, secondary_goal=800)
    assert resolve_goal(GoalTier.SECONDARY, WEDNESDAY, scalar_only) == 800


def test_record_goal_prefers_frozen_value(make_record):
    record = make_record(
        WEDNESDAY, primary_goal_at_that_day=300, secondary_goal_at_that_day=450
    )
    settings = Settings(primary_goal=1000, secondary_goal=2000)

    assert resolve_record_goal(GoalTier.PRIMARY, record, settings) == 300
    assert resolve_record_goal(GoalTier.SECONDARY, record, settings) == 450


def test_record_goal_frozen_zero_is_kept(make_record):
    record = make_record(WEDNESDAY, primary_goal_at_that_day=0)

    assert resolve_record_goal(GoalTier.PRIMARY, record, Settings(primary_goal=500)) == 0


def test_record_goal_without_frozen_value_resolves_live(make_record):
    record = make_record(SATURDAY)
    settings = Settings(primary_goals=(0, 100, 100, 100, 100, 100, 200))

    assert resolve_record_goal(GoalTier.PRIMARY, record, settings) == 200
    assert resolve_record_goal(GoalTier.SECONDARY, record, settings) == 300
