"""Shell profile Typer app factory."""

import typer

from mrsetup.api.shell.cmd_configure import cmd_configure
from mrsetup.api.shell.cmd_unconfigure import cmd_unconfigure
from mrsetup.cli._handle_stage_result import _handle_stage_result


def shell() -> typer.Typer:
    """Create and configure the shell Typer app."""
    app = typer.Typer(
        name="shell",
        help="MODEL_RUNNER_HOST shell profile entry",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Shell operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="configure")
    def configure_cmd() -> None:
        """Add the export line to the shell startup file."""
        _handle_stage_result(cmd_configure)()

    @app.command(name="unconfigure")
    def unconfigure_cmd() -> None:
        """Remove the export line from the shell startup file."""
        _handle_stage_result(cmd_unconfigure)()

    return app
