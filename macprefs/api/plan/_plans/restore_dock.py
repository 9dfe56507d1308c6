"""Undo minimize-dock and pin the Dock to the bottom of the screen."""

from ..ApplicationPlan import ApplicationPlan
from ..Directive import Directive
from ._dock import DOCK, DOCK_DOMAIN, MINIMIZED_DOCK_SETTINGS, RESTORED_ORIENTATION


def restore_dock() -> ApplicationPlan:
    deletes = tuple(Directive.delete(DOCK_DOMAIN, key, restarts=(DOCK.name,)) for key, _ in MINIMIZED_DOCK_SETTINGS)
    orientation = Directive.write(DOCK_DOMAIN, "orientation", RESTORED_ORIENTATION, restarts=(DOCK.name,))
    return ApplicationPlan(
        name="restore-dock",
        aliases=("show-dock",),
        description="Remove every minimize-dock setting and set the Dock orientation to bottom",
        directives=(*deletes, orientation),
        restart_order=(DOCK,),
    )
