"""Binary Typer app factory."""

import typer

from mrsetup.api.binary.cmd_build import cmd_build
from mrsetup.api.binary.cmd_download import cmd_download
from mrsetup.api.binary.cmd_install import cmd_install
from mrsetup.api.binary.cmd_status import cmd_status
from mrsetup.cli._handle_stage_result import _handle_stage_result


def binary() -> typer.Typer:
    """Create and configure the binary Typer app."""
    app = typer.Typer(
        name="binary",
        help="model-runner binary build and download",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Binary operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="install")
    def install_cmd() -> None:
        """Build or download the binary, as configured."""
        _handle_stage_result(cmd_install)()

    @app.command(name="build")
    def build_cmd() -> None:
        """Clone or update the source and build with CGO enabled."""
        _handle_stage_result(cmd_build)()

    @app.command(name="download")
    def download_cmd(
        url: str = typer.Option("", "--url", help="Download URL (default: config binary.download_url)"),
    ) -> None:
        """Download a pre-built binary."""
        _handle_stage_result(cmd_download)(url=url)

    @app.command(name="status")
    def status_cmd() -> None:
        """Show where the binary is and whether it is executable."""
        _handle_stage_result(cmd_status)()

    return app
