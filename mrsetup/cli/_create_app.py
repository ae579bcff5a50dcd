"""Create the main Typer CLI app."""

import typer

from mrsetup.api.setup.cmd_setup import cmd_setup
from mrsetup.api.setup.cmd_usage import cmd_usage
from mrsetup.api.uninstall.cmd_uninstall import cmd_uninstall
from mrsetup.cli._handle_stage_result import _handle_stage_result
from mrsetup.cli._print_usage import _print_usage
from mrsetup.cli.binary import binary
from mrsetup.cli.colima import colima
from mrsetup.cli.config import config
from mrsetup.cli.deps import deps
from mrsetup.cli.logs import logs
from mrsetup.cli.prereq import prereq
from mrsetup.cli.service import service
from mrsetup.cli.shell import shell
from mrsetup.cli.verify import verify


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Docker Model Runner GPU setup for Colima on Apple Silicon",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(config(), name="config")
    app.add_typer(prereq(), name="prereq")
    app.add_typer(deps(), name="deps")
    app.add_typer(binary(), name="binary")
    app.add_typer(service(), name="service")
    app.add_typer(verify(), name="verify")
    app.add_typer(colima(), name="colima")
    app.add_typer(shell(), name="shell")
    app.add_typer(logs(), name="logs")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    @app.command(name="setup")
    def setup_cmd() -> None:
        """Install model-runner as a GPU-accelerated LaunchAgent and wire it to Colima."""
        _handle_stage_result(cmd_setup, result_printer=_print_usage)()

    @app.command(name="uninstall")
    def uninstall_cmd() -> None:
        """Remove the model-runner service, binary, CLI plugin and logs."""
        _handle_stage_result(cmd_uninstall)()

    @app.command(name="usage")
    def usage_cmd() -> None:
        """Show the quick-start and troubleshooting guide."""
        _handle_stage_result(cmd_usage, result_printer=_print_usage)()

    return app
