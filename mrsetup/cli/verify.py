"""Verify Typer app factory."""

import typer

from mrsetup.api.verify.cmd_cli import cmd_cli
from mrsetup.api.verify.cmd_gpu import cmd_gpu
from mrsetup.api.verify.cmd_health import cmd_health
from mrsetup.cli._handle_stage_result import _handle_stage_result


def verify() -> typer.Typer:
    """Create and configure the verify Typer app."""
    app = typer.Typer(
        name="verify",
        help="Post-install checks",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Verify operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="gpu")
    def gpu_cmd() -> None:
        """Look for GPU support in the service log."""
        _handle_stage_result(cmd_gpu)()

    @app.command(name="health")
    def health_cmd() -> None:
        """Check that the service answers HTTP requests."""
        _handle_stage_result(cmd_health)()

    @app.command(name="cli")
    def cli_cmd() -> None:
        """Run 'docker model ls' against the service."""
        _handle_stage_result(cmd_cli)()

    return app
