"""Abstract base class for system backends."""

from abc import ABC, abstractmethod
from typing import Any

from .Scope import Scope


class _AbstractImpl(ABC):
    """Abstract base class for platform-specific preference store and service control."""

    @abstractmethod
    def write(self, domain: str, key: str, value: Any, scope: Scope) -> None:
        """Store `domain.key = value` in the given scope.

        Raises:
            PermissionDenied: Elevation was required and is unavailable
            KeyRejected: The store refused the key or value
            StoreUnavailable: The store could not be reached
        """
        pass

    @abstractmethod
    def delete(self, domain: str, key: str, scope: Scope) -> None:
        """Remove `domain.key` from the given scope.

        Raises:
            KeyNotFound: The key (or its whole domain) is absent
            PermissionDenied, KeyRejected, StoreUnavailable: as for write()
        """
        pass

    @abstractmethod
    def read(self, domain: str, key: str, scope: Scope) -> Any:
        """Return the stored value of `domain.key`.

        Raises:
            KeyNotFound: The key is absent
        """
        pass

    @abstractmethod
    def restart(self, name: str, relaunch: bool = False) -> bool:
        """Terminate the named process, relaunching it when `relaunch` is set.

        Returns:
            True if a running instance was terminated, False if none was running

        Raises:
            RestartFailed: Termination or relaunch failed
        """
        pass
