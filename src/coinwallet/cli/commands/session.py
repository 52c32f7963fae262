"""Session commands."""

import click


@click.group("session")
def session_group():
    """Manage the current session."""
    pass


@session_group.command("end")
@click.pass_context
def end_session(ctx):
    """End the session so its records can no longer be undone."""
    ctx.obj["undo_stack"].clear()
    click.echo("Session ended")


def register_commands(cli):
    """Register session commands with main CLI."""
    cli.add_command(session_group)
