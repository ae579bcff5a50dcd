"""Dependencies Typer app factory."""

import typer

from mrsetup.api.deps.cmd_install import cmd_install
from mrsetup.cli._handle_stage_result import _handle_stage_result


def deps() -> typer.Typer:
    """Create and configure the deps Typer app."""
    app = typer.Typer(
        name="deps",
        help="Homebrew dependencies",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Dependency operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="install")
    def install_cmd(
        source: str | None = typer.Option(
            None, "--source", help="Binary source the dependencies are for: build or download (default: config)"
        ),
    ) -> None:
        """Install llama.cpp, Go (build only) and the Docker CLI."""
        _handle_stage_result(cmd_install)(source=source)

    return app
