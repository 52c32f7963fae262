"""Status commands: today's progress, last record and recent goals."""

from datetime import date

import click
from coinwallet.cli.error_handling import require_wallet_or_exit
from coinwallet.cli.formatting import describe_record, format_coins
from coinwallet.domain.entities import WEEKDAY_LABELS
from coinwallet.domain.goals import weekday_index
from coinwallet.domain.ledger import get_last_record
from coinwallet.domain.stats import goal_series, today_summary


@click.command("status")
@click.pass_context
def show_status(ctx):
    """Show balance, today's progress and current debt."""
    data = require_wallet_or_exit(ctx)
    summary = today_summary(data, date.today())

    click.echo(f"Balance: {format_coins(summary.balance)}")
    click.echo(f"Today ({summary.date.isoformat()}): earned {format_coins(summary.earned)}")
    if summary.primary_goal > 0:
        click.echo(
            f"  Goal: {format_coins(summary.primary_goal)} "
            f"(remaining {format_coins(summary.remaining_primary)}, "
            f"target balance {format_coins(summary.target_balance)})"
        )
        click.echo(
            f"  Stretch goal: {format_coins(summary.secondary_goal)} "
            f"(remaining {format_coins(summary.remaining_secondary)})"
        )
    if data.settings.show_debt:
        click.echo(f"Debt: {format_coins(summary.debt)}")
    if ctx.obj["undo_stack"].has_undo():
        click.echo("Undo available for this session")


@click.command("last")
@click.pass_context
def show_last(ctx):
    """Show the most recently added record."""
    data = require_wallet_or_exit(ctx)
    record = get_last_record(data)
    if record is None:
        click.echo("No records found.")
        return

    click.echo(describe_record(record))
    click.echo(f"  ID: {record.id}")
    click.echo(f"  Timestamp: {record.timestamp}")
    if record.primary_goal_at_that_day is not None:
        click.echo(f"  Goal that day: {format_coins(record.primary_goal_at_that_day)}")
    if record.secondary_goal_at_that_day is not None:
        click.echo(
            f"  Stretch goal that day: {format_coins(record.secondary_goal_at_that_day)}"
        )


@click.command("goals")
@click.option("--days", default=7, show_default=True, type=click.IntRange(1, 366))
@click.pass_context
def show_goals(ctx, days: int):
    """Show earned coins against the daily goal for recent days."""
    data = require_wallet_or_exit(ctx)
    for point in goal_series(data, date.today(), days):
        if point.goal <= 0:
            mark = " "
        else:
            mark = "+" if point.reached else "-"
        click.echo(
            f"{mark} {point.date.isoformat()} {WEEKDAY_LABELS[weekday_index(point.date)]} "
            f"{format_coins(point.earned):>12s} / {format_coins(point.goal)}"
        )


def register_commands(cli):
    """Register status commands with main CLI."""
    cli.add_command(show_status)
    cli.add_command(show_last)
    cli.add_command(show_goals)
