"""Unit test fixtures.

Configuration helpers live in tests/conftest.py. This file holds an in-memory
system backend whose failures can be scripted per directive.
"""

from typing import Any

import pytest

from macprefs.api.system._AbstractImpl import _AbstractImpl
from macprefs.api.system.PreferenceError import KeyNotFound, PreferenceError
from tests.conftest import minimal_config_dict, minimal_macprefs_config, run_cmd

__all__ = [
    "ScriptedSystem",
    "minimal_config_dict",
    "minimal_macprefs_config",
    "run_cmd",
]


class ScriptedSystem(_AbstractImpl):
    """In-memory preference store that records every call.

    `failures` maps (domain, key) or a restart target name to the exception
    the next matching operation raises.
    """

    def __init__(self, failures: dict[Any, PreferenceError] | None = None, running: set[str] | None = None):
        self.store: dict[tuple[str, str, str], Any] = {}
        self.failures = dict(failures or {})
        self.running = running
        self.calls: list[tuple] = []

    def write(self, domain: str, key: str, value: Any, scope: str) -> None:
        self.calls.append(("write", domain, key, value, scope))
        if (domain, key) in self.failures:
            raise self.failures[(domain, key)]
        self.store[(scope, domain, key)] = value

    def delete(self, domain: str, key: str, scope: str) -> None:
        self.calls.append(("delete", domain, key, scope))
        if (domain, key) in self.failures:
            raise self.failures[(domain, key)]
        if (scope, domain, key) not in self.store:
            raise KeyNotFound(f"The domain/default pair of ({domain}, {key}) does not exist")
        del self.store[(scope, domain, key)]

    def read(self, domain: str, key: str, scope: str) -> Any:
        if (scope, domain, key) not in self.store:
            raise KeyNotFound(f"The domain/default pair of ({domain}, {key}) does not exist")
        return self.store[(scope, domain, key)]

    def restart(self, name: str, relaunch: bool = False) -> bool:
        self.calls.append(("restart", name, relaunch))
        if name in self.failures:
            raise self.failures[name]
        return self.running is None or name in self.running

    def restarts(self) -> list[str]:
        return [call[1] for call in self.calls if call[0] == "restart"]


@pytest.fixture
def scripted_system() -> ScriptedSystem:
    return ScriptedSystem()
