"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)

DEFAULT_DISPLAY_FORMAT = "yaml"


def _extract_display_format(ctx: typer.Context) -> str:
    """Get the display format stored by the main callback in the context chain.

    A sub-app invoked without the main callback (no format stored anywhere in
    the chain) uses the default format.

    Raises:
        ValueError: If an invalid display format value is encountered.
    """
    current: typer.Context | None = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and "display_format" in obj:
            value = obj["display_format"]
            if value in ("json", "yaml"):
                return value
            raise ValueError(f"Invalid display_format value: {value!r}")
        current = current.parent
    return DEFAULT_DISPLAY_FORMAT


def handle_stage_result(func: F, ctx: typer.Context) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as YAML or JSON, per `--display`)

    Args:
        func: `cmd_*` function returning a StageResult
        ctx: Context of the invoking Typer command

    The wrapped function exits with 0 on success and 1 otherwise.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from .display import get_display

        display_format = _extract_display_format(ctx)
        _run_single_execution(func, args, kwargs, get_display("cli"), display_format)

    return wrapper  # type: ignore[return-value]
