"""Export and import commands."""

from pathlib import Path

import click
from coinwallet.cli.error_handling import handle_domain_error, require_wallet_or_exit
from coinwallet.domain.errors import DomainError
from coinwallet.domain.transfer import TransferService, default_export_filename


@click.command("export")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    help="File to write (default: coinwallet-YYYYMMDD-HHMMSS.json, '-' for stdout)",
)
@click.pass_context
def export_wallet(ctx, output: str | None):
    """Export all wallet data as JSON."""
    data = require_wallet_or_exit(ctx)
    service = TransferService(ctx.obj["repository"])
    text = service.export_text(data)

    if output == "-":
        click.echo(text)
        return

    path = Path(output or default_export_filename())
    path.write_text(text + "\n", encoding="utf-8")
    click.echo(f"Exported {len(data.records)} records to {path}")


@click.command("import")
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def import_wallet(ctx, file_path: str, yes: bool):
    """Replace all wallet data with an exported JSON file.

    Older export formats are accepted and migrated.

    Examples:
        coinwallet import coinwallet-20240101-120000.json
    """
    repository = ctx.obj["repository"]
    service = TransferService(repository)

    if repository.load() is not None and not yes:
        click.confirm("This replaces all current wallet data. Continue?", abort=True)

    text = Path(file_path).read_text(encoding="utf-8")
    try:
        data = service.import_text(text)
    except DomainError as e:
        handle_domain_error(ctx, e)

    # Records from the previous data set can no longer be undone
    ctx.obj["undo_stack"].clear()
    click.echo(f"Imported {len(data.records)} records from {file_path}")


def register_commands(cli):
    """Register export and import commands with main CLI."""
    cli.add_command(export_wallet)
    cli.add_command(import_wallet)
