"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import typer

    from mrsetup.api.config.MRSetupConfig import MRSetupConfig
    from mrsetup.cli._create_app import _create_app
    from mrsetup.utils.logger import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    try:
        level = MRSetupConfig.load().log.level
    except ValueError:
        # commands report the broken config themselves
        level = "INFO"
    configure_logging(level=level)

    if "--version" in argv or "-v" in argv:
        from mrsetup.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"mrsetup {result.output.get('full_version') or result.output.get('version', 'unknown')}")
        return 0 if result.success else 1

    app = _create_app()
    try:
        app(argv)
        return 0
    except SystemExit as e:
        # click exits with the command's status; usage errors exit 2
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1


def setup_main() -> int:
    """Entry point of ``setup-colima-gpu-model-runner``.

    Arguments are global options (``--display json``) placed before the command.
    """
    return main([*sys.argv[1:], "setup"])


def uninstall_main() -> int:
    """Entry point of ``uninstall-model-runner``.

    Arguments are global options (``--display json``) placed before the command.
    """
    return main([*sys.argv[1:], "uninstall"])
