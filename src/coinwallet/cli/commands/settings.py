"""Settings commands."""

from dataclasses import replace
from datetime import date, timedelta

import click
from coinwallet.cli.error_handling import require_wallet_or_exit
from coinwallet.cli.formatting import format_coins
from coinwallet.domain.entities import WEEKDAY_LABELS, GoalTier
from coinwallet.domain.goals import resolve_goal, weekday_index
from coinwallet.domain.settings import SettingsService
from coinwallet.utils.amount_parser import parse_coin_amount, parse_weekday_amounts


@click.group("settings")
def settings_group():
    """Show and change goals and display settings."""
    pass


@settings_group.command("show")
@click.pass_context
def show_settings(ctx):
    """Show goal settings per weekday."""
    data = require_wallet_or_exit(ctx)
    settings = data.settings
    today = date.today()

    click.echo("\nDaily goals (goal / stretch):")
    click.echo("-" * 40)
    # Walk one week starting at the most recent Sunday
    sunday = today - timedelta(days=weekday_index(today))
    for offset, label in enumerate(WEEKDAY_LABELS):
        day = sunday + timedelta(days=offset)
        primary = resolve_goal(GoalTier.PRIMARY, day, settings)
        secondary = resolve_goal(GoalTier.SECONDARY, day, settings)
        click.echo(f"{label}: {format_coins(primary):>10s} / {format_coins(secondary)}")

    click.echo(f"\nShow goal line: {'yes' if settings.show_goal_line else 'no'}")
    click.echo(f"Show debt: {'yes' if settings.show_debt else 'no'}")
    if settings.debt_reset_date is not None:
        click.echo(f"Debt counted from: {settings.debt_reset_date.isoformat()}")


@settings_group.command("set")
@click.option("--primary", help="Daily goal for every weekday")
@click.option("--primary-weekdays", help="Seven daily goals, Sunday first (e.g. 0,500,500,500,500,500,800)")
@click.option("--secondary", help="Stretch goal for every weekday")
@click.option("--secondary-weekdays", help="Seven stretch goals, Sunday first")
@click.option("--show-goal-line/--hide-goal-line", default=None)
@click.option("--show-debt/--hide-debt", default=None)
@click.pass_context
def set_settings(
    ctx,
    primary: str | None,
    primary_weekdays: str | None,
    secondary: str | None,
    secondary_weekdays: str | None,
    show_goal_line: bool | None,
    show_debt: bool | None,
):
    """Change goals and display settings.

    A weekday list takes precedence over a single goal of the same tier.
    Without a stretch goal, the stretch goal is the goal plus 100.

    Examples:
        coinwallet settings set --primary 500
        coinwallet settings set --primary-weekdays 0,500,500,500,500,500,800 --secondary 1000
        coinwallet settings set --hide-debt
    """
    data = require_wallet_or_exit(ctx)
    service = SettingsService(ctx.obj["repository"])
    changes = {}

    try:
        if primary is not None:
            changes["primary_goal"] = parse_coin_amount(primary)
            changes["primary_goals"] = None
        if primary_weekdays is not None:
            changes["primary_goals"] = parse_weekday_amounts(primary_weekdays)
        if secondary is not None:
            changes["secondary_goal"] = parse_coin_amount(secondary)
            changes["secondary_goals"] = None
        if secondary_weekdays is not None:
            changes["secondary_goals"] = parse_weekday_amounts(secondary_weekdays)
    except ValueError as e:
        click.echo(f"Error: Invalid goal: {e}", err=True)
        ctx.exit(1)

    if show_goal_line is not None:
        changes["show_goal_line"] = show_goal_line
    if show_debt is not None:
        changes["show_debt"] = show_debt

    if not changes:
        click.echo("Nothing to change.")
        return

    if "primary_goals" in changes and changes["primary_goals"] is None:
        # A new single goal replaces weekday goals, legacy ones included
        changes["daily_goals"] = None

    service.save_settings(data, replace(data.settings, **changes))
    click.echo("Settings saved")


@settings_group.command("reset-debt")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def reset_debt(ctx, yes: bool):
    """Forget debt accrued before today."""
    data = require_wallet_or_exit(ctx)
    service = SettingsService(ctx.obj["repository"])

    if not yes:
        click.confirm("Reset debt to zero as of today?", abort=True)

    new_data = service.reset_debt(data, date.today())
    click.echo(f"Debt counted from {new_data.settings.debt_reset_date.isoformat()}")


def register_commands(cli):
    """Register settings commands with main CLI."""
    cli.add_command(settings_group)
