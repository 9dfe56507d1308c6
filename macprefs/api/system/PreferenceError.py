"""Error taxonomy for preference store and service control operations.

Backends raise these; the applier turns them into per-directive outcomes.
Each class carries a stable `kind` string used in command output.
"""


class PreferenceError(Exception):
    """Base class for store and service control failures."""

    kind = "preference_error"


class PermissionDenied(PreferenceError):
    """Elevated privilege was required but unavailable or refused."""

    kind = "permission_denied"


class KeyRejected(PreferenceError):
    """The store rejected the key or value (malformed or type-mismatched)."""

    kind = "key_rejected"


class StoreUnavailable(PreferenceError):
    """The backing store could not be reached (missing tool, missing or corrupt file)."""

    kind = "store_unavailable"


class KeyNotFound(PreferenceError):
    """The key is not present in the store."""

    kind = "key_not_found"


class RestartFailed(PreferenceError):
    """A service could not be terminated or relaunched."""

    kind = "restart_failed"
