"""Config Typer app factory."""

import typer

from mrsetup.api.config.cmd_init import cmd_init
from mrsetup.api.config.cmd_show import cmd_show
from mrsetup.api.config.cmd_version import cmd_version
from mrsetup.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Configuration operations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=False)
            raise typer.Exit()

    @app.command(name="show")
    def show_cmd(
        section: str = typer.Argument("", help="Configuration section name (all sections if omitted)"),
    ) -> None:
        """Show the effective configuration."""
        _handle_stage_result(cmd_show)(section)

    @app.command(name="init")
    def init_cmd() -> None:
        """Write a config file with default values."""
        _handle_stage_result(cmd_init)()

    @app.command(name="version")
    def version_cmd() -> None:
        """Show mrsetup version information."""
        _handle_stage_result(cmd_version)()

    return app
