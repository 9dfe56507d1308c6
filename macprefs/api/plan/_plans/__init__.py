"""Built-in plans, keyed by name."""

from collections.abc import Callable

from ..ApplicationPlan import ApplicationPlan
from .minimize_dock import minimize_dock
from .privacy_defaults import privacy_defaults
from .restore_dock import restore_dock

BUILTIN_PLANS: dict[str, Callable[[], ApplicationPlan]] = {
    "minimize-dock": minimize_dock,
    "restore-dock": restore_dock,
    "privacy-defaults": privacy_defaults,
}

__all__ = ["BUILTIN_PLANS", "minimize_dock", "privacy_defaults", "restore_dock"]
