"""Wallet initialization command."""

import click
from coinwallet.cli.error_handling import handle_domain_error
from coinwallet.cli.formatting import format_coins
from coinwallet.domain.errors import DomainError
from coinwallet.utils.amount_parser import parse_coin_amount


@click.command("init")
@click.argument("amount")
@click.option("--force", is_flag=True, help="Overwrite an existing wallet")
@click.pass_context
def init_wallet(ctx, amount: str, force: bool):
    """Initialize the wallet with your current coin balance.

    Examples:
        coinwallet init 125000
        coinwallet init "1,250,000" --force
    """
    repository = ctx.obj["repository"]

    if repository.load() is not None and not force:
        click.echo(
            "Error: Wallet is already initialized. Use --force to start over.",
            err=True,
        )
        ctx.exit(1)

    try:
        initial = parse_coin_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount: {e}", err=True)
        ctx.exit(1)

    try:
        repository.initialize(initial)
    except DomainError as e:
        handle_domain_error(ctx, e)
    ctx.obj["undo_stack"].clear()
    click.echo(f"Initialized wallet with {format_coins(initial)} coins")


def register_commands(cli):
    """Register init command with main CLI."""
    cli.add_command(init_wallet)
