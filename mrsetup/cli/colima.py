"""Colima Typer app factory."""

import typer

from mrsetup.api.colima.cmd_start import cmd_start
from mrsetup.api.colima.cmd_status import cmd_status
from mrsetup.cli._handle_stage_result import _handle_stage_result


def colima() -> typer.Typer:
    """Create and configure the colima Typer app."""
    app = typer.Typer(
        name="colima",
        help="Colima VM operations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Colima operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="start")
    def start_cmd() -> None:
        """Start Colima unless it is already running."""
        _handle_stage_result(cmd_start)()

    @app.command(name="status")
    def status_cmd() -> None:
        """Show whether Colima is running."""
        _handle_stage_result(cmd_status)()

    return app
