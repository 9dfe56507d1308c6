import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance under the `macprefs` namespace.

    Configuration happens once at the CLI entry point; library use without it
    falls through to whatever the host application configured.
    """
    return logging.getLogger(f"macprefs.{name}")
