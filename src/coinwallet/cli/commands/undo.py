"""Undo command."""

import click
from coinwallet.cli.error_handling import handle_domain_error, require_wallet_or_exit
from coinwallet.cli.formatting import describe_record, format_coins
from coinwallet.domain.errors import NO_SESSION_UNDO, DomainError
from coinwallet.domain.ledger import get_last_coin_amount
from coinwallet.domain.undo import UndoService


@click.command("undo")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def undo_record(ctx, yes: bool):
    """Undo the last record added in this session.

    Records added in earlier sessions cannot be undone.
    """
    data = require_wallet_or_exit(ctx)
    service = UndoService(ctx.obj["repository"], ctx.obj["undo_stack"])

    if not service.has_undo():
        click.echo(f"Error: {NO_SESSION_UNDO}", err=True)
        ctx.exit(1)

    if not yes:
        click.confirm("Undo the last record added in this session?", abort=True)

    before = {r.id: r for r in data.records}
    try:
        new_data = service.undo_last_session_record(data)
    except DomainError as e:
        handle_domain_error(ctx, e)

    removed = set(before) - {r.id for r in new_data.records}
    for record_id in removed:
        click.echo(f"Undid {describe_record(before[record_id])}")
    click.echo(f"  Balance is now {format_coins(get_last_coin_amount(new_data))}")


def register_commands(cli):
    """Register undo command with main CLI."""
    cli.add_command(undo_record)
