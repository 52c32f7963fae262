"""Add record command."""

import click
from coinwallet.cli.error_handling import handle_domain_error, require_wallet_or_exit
from coinwallet.cli.formatting import describe_record, format_coins
from coinwallet.domain.entities import RecordMode
from coinwallet.domain.errors import DomainError
from coinwallet.domain.ledger import LedgerService, get_last_coin_amount, get_last_record
from coinwallet.utils.amount_parser import parse_coin_amount
from coinwallet.utils.date_parser import parse_date


@click.command("add")
@click.argument("amount")
@click.option(
    "--mode",
    type=click.Choice([m.value for m in RecordMode]),
    default=RecordMode.ADD.value,
    show_default=True,
    help="add = coins earned; premium/serebo/pick/other = coins spent",
)
@click.option(
    "--date",
    "date_str",
    default="today",
    help="Day of the record (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.pass_context
def add_record(ctx, amount: str, mode: str, date_str: str):
    """Record your coin balance AMOUNT after an event.

    The difference to the previous balance is booked as earned (mode add)
    or spent in the given category.

    Examples:
        coinwallet add 126500
        coinwallet add 96500 --mode premium
        coinwallet add 131000 --date yesterday
    """
    data = require_wallet_or_exit(ctx)
    service = LedgerService(ctx.obj["repository"], ctx.obj["undo_stack"])

    try:
        record_date = parse_date(date_str)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        coin_amount = parse_coin_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    previous = get_last_coin_amount(data)
    try:
        new_data = service.add_record(data, record_date, coin_amount, RecordMode(mode))
    except DomainError as e:
        handle_domain_error(ctx, e)

    record = get_last_record(new_data)
    click.echo(f"Recorded {describe_record(record)}")
    click.echo(f"  Previous balance: {format_coins(previous)}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_record)
