"""CLI error handling helpers."""

import click

from coinwallet.domain.entities import AppData
from coinwallet.domain.errors import DomainError
from coinwallet.domain.repository import WalletRepository


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def require_wallet_or_exit(ctx: click.Context) -> AppData:
    """Load wallet data, or exit with a CLI error if not initialized."""
    repository: WalletRepository = ctx.obj["repository"]
    try:
        return repository.require()
    except DomainError as exc:
        handle_domain_error(ctx, exc)
