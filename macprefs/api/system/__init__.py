"""System module - preference store and service control backends."""

from .PreferenceError import (
    KeyNotFound,
    KeyRejected,
    PermissionDenied,
    PreferenceError,
    RestartFailed,
    StoreUnavailable,
)
from .Scope import SCOPES, Scope
from .System import System
from .SystemConfig import SystemConfig

__all__ = [
    "SCOPES",
    "KeyNotFound",
    "KeyRejected",
    "PermissionDenied",
    "PreferenceError",
    "RestartFailed",
    "Scope",
    "StoreUnavailable",
    "System",
    "SystemConfig",
]
