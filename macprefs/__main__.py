"""Entry point for `python -m macprefs`."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
