"""Dock settings shared by the minimize and restore plans."""

from ..RestartTarget import RestartTarget

DOCK_DOMAIN = "com.apple.dock"

DOCK = RestartTarget(name="Dock")

# Every key minimize-dock writes; restore-dock deletes exactly these.
MINIMIZED_DOCK_SETTINGS: tuple[tuple[str, bool | int | float | str], ...] = (
    ("autohide", True),
    # Huge delay and animation time: the Dock effectively never shows
    ("autohide-delay", 1000.0),
    ("autohide-time-modifier", 1000.0),
    ("tilesize", 1),
    ("static-only", True),
    ("showhidden", True),
    ("size-immutable", True),
    ("hide-mirror", True),
    ("no-bouncing", True),
    ("mineffect", "scale"),
)

# Pinned explicitly by restore-dock rather than left to the OS fallback.
RESTORED_ORIENTATION = "bottom"
