"""Unit tests for macprefs.api.plan.ApplicationPlan."""

import pytest
from pydantic import ValidationError

from macprefs.api.plan.ApplicationPlan import ApplicationPlan
from macprefs.api.plan.Directive import Directive
from macprefs.api.plan.RestartTarget import RestartTarget


def _plan(directives, restart_order):
    return ApplicationPlan(name="test", directives=tuple(directives), restart_order=tuple(restart_order))


def test_directive_restart_must_be_in_restart_order():
    with pytest.raises(ValidationError, match="missing from restart_order"):
        _plan([Directive.write("com.apple.finder", "k", True, restarts=("Finder",))], [RestartTarget(name="Dock")])


def test_restart_order_names_unique():
    with pytest.raises(ValidationError, match="more than once"):
        _plan([], [RestartTarget(name="Dock"), RestartTarget(name="Dock")])


def test_restart_targets_for_follows_restart_order_and_dedupes():
    finder_first = Directive.write("com.apple.finder", "a", True, restarts=("Finder",))
    dock = Directive.write("com.apple.dock", "b", True, restarts=("Dock",))
    both = Directive.write("com.apple.dock", "c", True, restarts=("Dock", "Finder"))
    plan = _plan(
        [finder_first, dock, both],
        [RestartTarget(name="Dock"), RestartTarget(name="Finder"), RestartTarget(name="SystemUIServer")],
    )

    targets = plan.restart_targets_for(plan.directives)

    assert [t.name for t in targets] == ["Dock", "Finder"]


def test_restart_targets_for_untouched_targets_is_empty():
    plan = _plan([Directive.write("com.apple.dock", "b", True)], [RestartTarget(name="Dock")])
    assert plan.restart_targets_for(plan.directives) == []


def test_plan_loads_from_plain_data():
    plan = ApplicationPlan.model_validate(
        {
            "name": "quiet",
            "directives": [
                {"domain": "com.apple.finder", "key": "FinderSounds", "action": "write", "value": False,
                 "restarts": ["Finder"]},
            ],
            "restart_order": [{"name": "Finder"}],
        }
    )
    assert plan.directives[0].value is False
    assert plan.directives[0].restarts == ("Finder",)
    assert plan.restart_order[0].relaunch is False


def test_to_output():
    plan = _plan([Directive.delete("com.apple.dock", "tilesize", restarts=("Dock",))], [RestartTarget(name="Dock")])
    output = plan.to_output()
    assert output["name"] == "test"
    assert output["directives"][0]["action"] == "delete"
    assert output["restart_order"] == [{"name": "Dock", "relaunch": False}]
