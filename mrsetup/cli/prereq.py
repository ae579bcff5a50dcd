"""Prerequisite Typer app factory."""

import typer

from mrsetup.api.prereq.cmd_check import cmd_check
from mrsetup.cli._handle_stage_result import _handle_stage_result


def prereq() -> typer.Typer:
    """Create and configure the prereq Typer app."""
    app = typer.Typer(
        name="prereq",
        help="Host prerequisite checks",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Prerequisite operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="check")
    def check_cmd(
        install: bool = typer.Option(True, "--install/--no-install", help="Install Colima when missing"),
    ) -> None:
        """Check for macOS, Apple Silicon, Homebrew and Colima."""
        _handle_stage_result(cmd_check)(install_missing=install)

    return app
