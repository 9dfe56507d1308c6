"""Unit tests for the sandbox system backend."""

import json

import pytest

from macprefs.api.plan.ApplicationPlan import ApplicationPlan
from macprefs.api.plan.Directive import Directive
from macprefs.api.plan.PreferenceApplier import PreferenceApplier
from macprefs.api.system._sandbox._Data import _Data
from macprefs.api.system._sandbox._Impl import _Impl
from macprefs.api.system.PreferenceError import KeyNotFound, PermissionDenied, StoreUnavailable
from tests.conftest import read_sandbox_state


def test_write_read_delete(macprefs_home):
    impl = _Impl(_Data())
    impl.write("com.apple.dock", "autohide", True, "current_user")

    assert impl.read("com.apple.dock", "autohide", "current_user") is True
    assert read_sandbox_state(macprefs_home)["preferences"]["current_user"] == {"com.apple.dock": {"autohide": True}}

    impl.delete("com.apple.dock", "autohide", "current_user")
    assert read_sandbox_state(macprefs_home)["preferences"]["current_user"] == {}


def test_scopes_are_separate(macprefs_home):
    impl = _Impl(_Data())
    impl.write("com.apple.screensaver", "idleTime", 0, "current_host")
    with pytest.raises(KeyNotFound):
        impl.read("com.apple.screensaver", "idleTime", "current_user")


def test_delete_missing(macprefs_home):
    impl = _Impl(_Data())
    with pytest.raises(KeyNotFound, match="not found"):
        impl.delete("com.apple.dock", "autohide", "current_user")
    impl.write("com.apple.dock", "tilesize", 1, "current_user")
    with pytest.raises(KeyNotFound, match="does not exist"):
        impl.delete("com.apple.dock", "autohide", "current_user")


def test_system_scope_without_elevation(macprefs_home):
    impl = _Impl(_Data(elevation_available=False))
    with pytest.raises(PermissionDenied):
        impl.write("/Library/Preferences/x", "k", 0, "system")
    impl.write("com.apple.dock", "k", 0, "current_user")


def test_corrupt_state_file(macprefs_home):
    (macprefs_home / "sandbox.json").write_text("[]")
    with pytest.raises(StoreUnavailable, match="corrupt"):
        _Impl(_Data()).write("com.apple.dock", "k", 0, "current_user")


def test_absolute_state_file(tmp_path):
    state = tmp_path / "elsewhere" / "state.json"
    impl = _Impl(_Data(state_file=str(state)))
    impl.write("com.apple.dock", "k", "v", "current_user")
    assert state.exists()
    assert not state.with_suffix(".json.tmp").exists()


def test_restarts_recorded(macprefs_home):
    impl = _Impl(_Data(running=["Dock"]))
    assert impl.restart("Dock") is True
    assert impl.restart("PowerChime") is False
    assert impl.restart("Music", relaunch=True) is True
    assert impl.restarts() == ["Dock", "Music"]


def test_rejects_wrong_data():
    with pytest.raises(ValueError):
        _Impl({"state_file": "x.json"})


@pytest.mark.parametrize(
    "state",
    [
        {"preferences": {"current_user": []}},
        {"preferences": {"current_user": {"com.apple.dock": "autohide"}}},
        {"preferences": {}, "restarts": {"Dock": 1}},
    ],
)
def test_corrupt_nested_state(macprefs_home, state):
    (macprefs_home / "sandbox.json").write_text(json.dumps(state))
    impl = _Impl(_Data())
    with pytest.raises(StoreUnavailable, match="corrupt"):
        impl.write("com.apple.dock", "k", 0, "current_user")
    with pytest.raises(StoreUnavailable, match="corrupt"):
        impl.restart("Dock")


def test_corrupt_state_is_isolated_per_directive(macprefs_home):
    (macprefs_home / "sandbox.json").write_text(json.dumps({"preferences": {"current_user": []}}))
    plan = ApplicationPlan(
        name="two-writes",
        directives=(
            Directive.write("com.apple.dock", "autohide", True),
            Directive.write("com.apple.dock", "tilesize", 1),
        ),
    )

    result = PreferenceApplier(_Impl(_Data())).apply(plan)

    assert [o.error_kind for o in result.outcomes] == ["store_unavailable", "store_unavailable"]
    assert result.success is False
