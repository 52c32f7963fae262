"""Main CLI entry point."""

import logging

import click
from coinwallet.database.factories import create_session_store, create_sqlite_store
from coinwallet.domain.repository import WalletRepository
from coinwallet.domain.undo import SessionUndoStack

# Import and register all commands at module level
from coinwallet.cli.commands import (
    init_cmd,
    add,
    undo,
    status,
    stats,
    settings,
    transfer,
    session,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides COINWALLET_DB_PATH environment variable)",
    envvar="COINWALLET_DB_PATH",
)
@click.option(
    "--session",
    "session_id",
    help="Session id bounding undo (defaults to the invoking shell)",
    envvar="COINWALLET_SESSION",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, session_id: str | None, verbose: bool):
    """Coinwallet - in-game coin ledger.

    Log your coin balance after each play or purchase. Coinwallet turns the
    differences into earnings and spending per category, tracks daily
    goals and carries unmet goals forward as debt.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Open storage only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        store = create_sqlite_store(database_path=db_path)
        store.connect()
        session_store = create_session_store(database_path=db_path, session_id=session_id)
        session_store.connect()
        ctx.call_on_close(store.disconnect)
        ctx.call_on_close(session_store.disconnect)
        ctx.obj["repository"] = WalletRepository(store)
        ctx.obj["undo_stack"] = SessionUndoStack(session_store)


# Register all commands
init_cmd.register_commands(cli)
add.register_commands(cli)
undo.register_commands(cli)
status.register_commands(cli)
stats.register_commands(cli)
settings.register_commands(cli)
transfer.register_commands(cli)
session.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
