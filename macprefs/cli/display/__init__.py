"""Display utilities for the CLI."""

from .CLIDisplay import CLIDisplay
from .Display import Display
from .display_context import get_display

__all__ = ["CLIDisplay", "Display", "get_display"]
