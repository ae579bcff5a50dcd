"""Service log Typer app factory."""

import typer

from mrsetup.api.logs.cmd_tail import cmd_tail
from mrsetup.cli._handle_stage_result import _handle_stage_result


def logs() -> typer.Typer:
    """Create and configure the logs Typer app."""
    app = typer.Typer(
        name="logs",
        help="model-runner service logs",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Log operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="tail")
    def tail_cmd(
        lines: int = typer.Option(50, "--lines", "-n", min=1, help="Number of lines to show"),
        errors: bool = typer.Option(False, "--errors", "-e", help="Show the error log instead of the output log"),
    ) -> None:
        """Show the last lines of the service log."""
        _handle_stage_result(cmd_tail)(lines=lines, stream="err" if errors else "out")

    return app
