"""System public API - preference store and service control behind one backend."""

import importlib
from typing import Any

from ._AbstractImpl import _AbstractImpl
from .Scope import Scope
from .SystemConfig import _BACKEND_REGISTRY, SystemConfig


class System:
    """Public API for preference store and service control operations.

    Use as a context manager; the backend implementation is selected from
    `system_config.type`.
    """

    def __init__(self, system_config: SystemConfig):
        self.system_config = system_config
        self._impl: _AbstractImpl | None = None

    @property
    def backend_type(self) -> str:
        return self.system_config.type

    def __enter__(self) -> "System":
        backend_type = self.system_config.type
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        # Import implementation class directly from backend _Impl module
        module = importlib.import_module(f"macprefs.api.system._{backend_type}._Impl")
        self._impl = module._Impl(self.system_config.data)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Backends hold no resources, but we keep the pattern for consistency
        self._impl = None
        return False

    def _require_impl(self) -> _AbstractImpl:
        if not self._impl:
            raise RuntimeError("System not initialized. Use as context manager first.")
        return self._impl

    def write(self, domain: str, key: str, value: Any, scope: Scope) -> None:
        self._require_impl().write(domain, key, value, scope)

    def delete(self, domain: str, key: str, scope: Scope) -> None:
        self._require_impl().delete(domain, key, scope)

    def read(self, domain: str, key: str, scope: Scope) -> Any:
        return self._require_impl().read(domain, key, scope)

    def restart(self, name: str, relaunch: bool = False) -> bool:
        return self._require_impl().restart(name, relaunch=relaunch)
