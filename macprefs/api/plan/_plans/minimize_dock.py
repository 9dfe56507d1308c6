"""Hide the Dock as aggressively as preferences allow."""

from ..ApplicationPlan import ApplicationPlan
from ..Directive import Directive
from ._dock import DOCK, DOCK_DOMAIN, MINIMIZED_DOCK_SETTINGS


def minimize_dock() -> ApplicationPlan:
    return ApplicationPlan(
        name="minimize-dock",
        aliases=("hide-dock",),
        description="Auto-hide the Dock with an extreme delay, minimum size and a static-only layout",
        directives=tuple(
            Directive.write(DOCK_DOMAIN, key, value, restarts=(DOCK.name,)) for key, value in MINIMIZED_DOCK_SETTINGS
        ),
        restart_order=(DOCK,),
    )
