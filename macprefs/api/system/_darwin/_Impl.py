"""macOS system implementation - drives the `defaults` and `killall` tools."""

import os
import plistlib
import re
import subprocess
from typing import Any

from ....utils.get_logger import get_logger
from .._AbstractImpl import _AbstractImpl
from ..PreferenceError import (
    KeyNotFound,
    KeyRejected,
    PermissionDenied,
    PreferenceError,
    RestartFailed,
    StoreUnavailable,
)
from ..Scope import Scope
from ._Data import _Data

logger = get_logger("system.darwin")

# `defaults` wording for an absent key or domain, matched case-insensitively
_ABSENT_PATTERN = re.compile(r"does not exist|domain \(.*\) not found", re.IGNORECASE)
_PERMISSION_MARKERS = (
    "a password is required",
    "not in the sudoers",
    "operation not permitted",
    "permission denied",
)
_UNWRITABLE_MARKER = "could not write domain"
_NOT_RUNNING_MARKER = "no matching processes"


class _Impl(_AbstractImpl):
    """macOS-specific preference store and service control."""

    def __init__(self, data: _Data):
        if not isinstance(data, _Data):
            raise ValueError("macOS system config data is required")
        self.data = data

    @staticmethod
    def _value_args(value: Any) -> list[str]:
        """Translate a typed value into `defaults write` type flag and argument."""
        # bool first: bool subclasses int
        if isinstance(value, bool):
            return ["-bool", "true" if value else "false"]
        if isinstance(value, int):
            return ["-int", str(value)]
        if isinstance(value, float):
            return ["-float", repr(value)]
        if isinstance(value, str):
            return ["-string", value]
        raise KeyRejected(f"unsupported value type {type(value).__name__}: {value!r}")

    def _elevation_prefix(self) -> list[str]:
        """Command prefix for system-scope operations, empty when already root."""
        if os.geteuid() == 0:
            return []
        return list(self.data.elevate_command)

    def _defaults_argv(self, scope: Scope, verb: str, domain: str, *args: str) -> list[str]:
        argv = [self.data.defaults_path]
        if scope == "current_host":
            argv.append("-currentHost")
        argv += [verb, domain, *args]
        if scope == "system":
            argv = self._elevation_prefix() + argv
        return argv

    def _run(self, argv: list[str], *, text: bool = True) -> subprocess.CompletedProcess:
        """Execute a command and return the result.

        A missing elevation tool is PermissionDenied; any other missing tool is
        StoreUnavailable.
        """
        logger.debug("Running %s", argv)
        try:
            return subprocess.run(argv, capture_output=True, text=text, check=False)
        except FileNotFoundError as e:
            if self.data.elevate_command and argv[0] == self.data.elevate_command[0]:
                raise PermissionDenied(f"elevation unavailable: command not found: {argv[0]}") from e
            raise StoreUnavailable(f"command not found: {argv[0]}") from e
        except OSError as e:
            raise StoreUnavailable(f"failed to run {argv[0]}: {e}") from e

    def _classify(self, scope: Scope, stderr: str, *, absent_ok: bool) -> PreferenceError:
        """Map a failed `defaults` invocation onto the error taxonomy."""
        message = stderr.strip() or "defaults exited with non-zero status"
        lowered = message.lower()
        # Anything sudo itself reports means the elevated command never ran
        if any(line.startswith("sudo:") for line in lowered.splitlines()):
            return PermissionDenied(message)
        if any(marker in lowered for marker in _PERMISSION_MARKERS):
            return PermissionDenied(message)
        if absent_ok and _ABSENT_PATTERN.search(message):
            return KeyNotFound(message)
        if _UNWRITABLE_MARKER in lowered:
            # Without root, a system-wide plist is unwritable by definition
            if scope == "system" and os.geteuid() != 0 and not self.data.elevate_command:
                return PermissionDenied(message)
            return StoreUnavailable(message)
        return KeyRejected(message)

    def write(self, domain: str, key: str, value: Any, scope: Scope) -> None:
        argv = self._defaults_argv(scope, "write", domain, key, *self._value_args(value))
        p = self._run(argv)
        if p.returncode != 0:
            raise self._classify(scope, p.stderr, absent_ok=False)

    def delete(self, domain: str, key: str, scope: Scope) -> None:
        p = self._run(self._defaults_argv(scope, "delete", domain, key))
        if p.returncode != 0:
            raise self._classify(scope, p.stderr, absent_ok=True)

    def read(self, domain: str, key: str, scope: Scope) -> Any:
        """Read a typed value by exporting the whole domain as a plist."""
        p = self._run(self._defaults_argv(scope, "export", domain, "-"), text=False)
        if p.returncode != 0:
            raise self._classify(scope, p.stderr.decode(errors="replace"), absent_ok=True)
        try:
            exported = plistlib.loads(p.stdout)
        except plistlib.InvalidFileException as e:
            raise StoreUnavailable(f"unreadable export of {domain}: {e}") from e
        if not isinstance(exported, dict) or key not in exported:
            raise KeyNotFound(f"The domain/default pair of ({domain}, {key}) does not exist")
        return exported[key]

    def restart(self, name: str, relaunch: bool = False) -> bool:
        try:
            p = self._run([self.data.killall_path, name])
        except StoreUnavailable as e:
            raise RestartFailed(str(e)) from e

        was_running = p.returncode == 0
        if not was_running and _NOT_RUNNING_MARKER not in p.stderr.lower():
            raise RestartFailed(f"killall {name} failed: {p.stderr.strip()}")

        if relaunch:
            try:
                p = self._run([self.data.open_path, "-a", name])
            except StoreUnavailable as e:
                raise RestartFailed(str(e)) from e
            if p.returncode != 0:
                raise RestartFailed(f"relaunch of {name} failed: {p.stderr.strip()}")

        return was_running or relaunch
