"""CLI - main entry point."""

import sys


def _configure_logging() -> None:
    """Set up the rotating log file from configuration, falling back to defaults."""
    from ..api.config.LogConfig import LogConfig
    from ..api.config.MacprefsConfig import MacprefsConfig
    from ..utils.configure_logging import configure_logging

    try:
        config = MacprefsConfig.load()
        log_config, log_file = config.log, config.log_file
    except ValueError:
        # Commands report the configuration error themselves
        log_config, log_file = LogConfig(), None
    configure_logging(
        log_file,
        level=log_config.level,
        max_bytes=log_config.max_bytes,
        backup_count=log_config.backup_count,
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import typer

    from .. import __version__
    from ._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        print(f"macprefs {__version__}")
        return 0

    _configure_logging()

    app = _create_app()
    try:
        app(argv)
        return 0
    except SystemExit as e:
        # Usage errors are reported by typer itself and arrive here as exit code 2
        return e.code if isinstance(e.code, int) else (0 if e.code is None else 1)
    except typer.Exit as e:
        return e.exit_code
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
