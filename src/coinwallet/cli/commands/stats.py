"""Statistics command."""

import click
from coinwallet.cli.error_handling import require_wallet_or_exit
from coinwallet.cli.formatting import MODE_LABELS, format_totals
from coinwallet.domain.stats import (
    calculate_daily_stats,
    calculate_monthly_stats,
    calculate_total_stats,
    calculate_weekly_stats,
    usage_breakdown,
)


@click.command("stats")
@click.option("--daily", "period", flag_value="daily", help="Totals per day")
@click.option("--weekly", "period", flag_value="weekly", help="Totals per week (Monday start)")
@click.option("--monthly", "period", flag_value="monthly", help="Totals per month")
@click.option(
    "--limit",
    default=5,
    show_default=True,
    help="Number of most recent periods to show (0 = all)",
)
@click.pass_context
def show_stats(ctx, period: str | None, limit: int):
    """Show earned and spent coins.

    Without a period option, all-time totals and the spending breakdown
    are shown.

    Examples:
        coinwallet stats
        coinwallet stats --weekly --limit 0
    """
    data = require_wallet_or_exit(ctx)
    records = data.records
    if not records:
        click.echo("No records found.")
        return

    if period is None:
        click.echo(f"All time: {format_totals(calculate_total_stats(records))}")
        click.echo("\nSpending:")
        for share in usage_breakdown(records):
            click.echo(
                f"  {MODE_LABELS[share.mode]:12s} {share.amount:>12,} ({share.percentage:5.1f}%)"
            )
        return

    if period == "daily":
        rows = [(s.date.isoformat(), s.totals) for s in reversed(calculate_daily_stats(records))]
    elif period == "weekly":
        rows = [(s.label, s.totals) for s in reversed(calculate_weekly_stats(records))]
    else:
        rows = [(s.label, s.totals) for s in calculate_monthly_stats(records)]

    if limit > 0:
        rows = rows[:limit]
    for label, totals in rows:
        click.echo(f"{label:15s} {format_totals(totals)}")


def register_commands(cli):
    """Register stats command with main CLI."""
    cli.add_command(show_stats)
