"""Display factory."""

from collections.abc import Callable
from typing import Literal

from .CLIDisplay import CLIDisplay
from .Display import Display

DisplayMode = Literal["cli"]

_FACTORIES: dict[str, Callable[[], Display]] = {"cli": CLIDisplay}


def get_display(mode: DisplayMode = "cli") -> Display:
    """Get the display implementation for `mode`."""
    factory = _FACTORIES.get(mode)
    if factory is None:
        raise ValueError(f"Unsupported display mode: {mode}")
    return factory()
