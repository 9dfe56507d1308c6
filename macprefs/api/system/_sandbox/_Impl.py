"""Sandbox system implementation - a JSON file stands in for the preference store."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from ....utils.get_home_dir import get_home_dir
from ....utils.get_logger import get_logger
from .._AbstractImpl import _AbstractImpl
from ..PreferenceError import KeyNotFound, PermissionDenied, StoreUnavailable
from ..Scope import SCOPES, Scope
from ._Data import _Data

logger = get_logger("system.sandbox")


class _Impl(_AbstractImpl):
    """File-backed preference store that records restarts instead of killing processes.

    State layout::

        {
            "preferences": {"current_user": {"com.apple.dock": {"autohide": true}}, ...},
            "restarts": ["Dock", ...]
        }
    """

    def __init__(self, data: _Data):
        if not isinstance(data, _Data):
            raise ValueError("sandbox system config data is required")
        self.data = data

    @property
    def state_path(self) -> Path:
        path = Path(self.data.state_file).expanduser()
        return path if path.is_absolute() else get_home_dir(self.data.state_file)

    def _load(self) -> dict[str, Any]:
        path = self.state_path
        if not path.exists():
            return {"preferences": {scope: {} for scope in SCOPES}, "restarts": []}
        try:
            state = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise StoreUnavailable(f"Sandbox state file {path} is unreadable: {e}") from e
        if not isinstance(state, dict) or not isinstance(state.get("preferences"), dict):
            raise StoreUnavailable(f"Sandbox state file {path} is corrupt")
        for scope in SCOPES:
            domains = state["preferences"].setdefault(scope, {})
            if not isinstance(domains, dict) or not all(isinstance(prefs, dict) for prefs in domains.values()):
                raise StoreUnavailable(f"Sandbox state file {path} is corrupt: preferences.{scope}")
        if not isinstance(state.setdefault("restarts", []), list):
            raise StoreUnavailable(f"Sandbox state file {path} is corrupt: restarts")
        return state

    def _save(self, state: dict[str, Any]) -> None:
        """Write state atomically (temp file, then rename)."""
        path = self.state_path
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w", encoding="utf-8") as fh:
                json.dump(state, fh, indent=2)
            temp_path.replace(path)
        except OSError as e:
            with suppress(OSError):
                temp_path.unlink()
            raise StoreUnavailable(f"Failed to save sandbox state {path}: {e}") from e

    def _check_scope(self, domain: str, scope: Scope) -> None:
        if scope == "system" and not self.data.elevation_available:
            raise PermissionDenied(f"Could not write domain {domain}: elevation unavailable")

    def write(self, domain: str, key: str, value: Any, scope: Scope) -> None:
        self._check_scope(domain, scope)
        state = self._load()
        state["preferences"][scope].setdefault(domain, {})[key] = value
        self._save(state)

    def delete(self, domain: str, key: str, scope: Scope) -> None:
        self._check_scope(domain, scope)
        state = self._load()
        domain_prefs = state["preferences"][scope].get(domain)
        if domain_prefs is None:
            raise KeyNotFound(f"Domain ({domain}) not found.")
        if key not in domain_prefs:
            raise KeyNotFound(f"The domain/default pair of ({domain}, {key}) does not exist")
        del domain_prefs[key]
        if not domain_prefs:
            del state["preferences"][scope][domain]
        self._save(state)

    def read(self, domain: str, key: str, scope: Scope) -> Any:
        domain_prefs = self._load()["preferences"][scope].get(domain, {})
        if key not in domain_prefs:
            raise KeyNotFound(f"The domain/default pair of ({domain}, {key}) does not exist")
        return domain_prefs[key]

    def restart(self, name: str, relaunch: bool = False) -> bool:
        if self.data.running is not None and name not in self.data.running and not relaunch:
            logger.info("Sandbox: %s is not running", name)
            return False
        state = self._load()
        state["restarts"].append(name)
        self._save(state)
        return True

    def restarts(self) -> list[str]:
        """Names of every restart recorded in the state file, oldest first."""
        return list(self._load()["restarts"])
