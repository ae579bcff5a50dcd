"""Service Typer app factory."""

import typer

from mrsetup.api.service.cmd_install import cmd_install
from mrsetup.api.service.cmd_restart import cmd_restart
from mrsetup.api.service.cmd_start import cmd_start
from mrsetup.api.service.cmd_status import cmd_status
from mrsetup.api.service.cmd_stop import cmd_stop
from mrsetup.api.service.cmd_uninstall import cmd_uninstall
from mrsetup.cli._handle_stage_result import _handle_stage_result


def service() -> typer.Typer:
    """Create and configure the service Typer app."""
    app = typer.Typer(
        name="service",
        help="model-runner LaunchAgent install/uninstall",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Service operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="status")
    def status_cmd() -> None:
        """Check service status."""
        _handle_stage_result(cmd_status)()

    @app.command(name="start")
    def start_cmd() -> None:
        """Start service."""
        _handle_stage_result(cmd_start)()

    @app.command(name="stop")
    def stop_cmd() -> None:
        """Stop service."""
        _handle_stage_result(cmd_stop)()

    @app.command(name="restart")
    def restart_cmd() -> None:
        """Restart service."""
        _handle_stage_result(cmd_restart)()

    @app.command(name="install")
    def install_cmd() -> None:
        """Write the LaunchAgent plist and load it."""
        _handle_stage_result(cmd_install)()

    @app.command(name="uninstall")
    def uninstall_cmd() -> None:
        """Unload the LaunchAgent and remove its plist."""
        _handle_stage_result(cmd_uninstall)()

    return app
