"""Unit tests for macprefs.api.plan.PreferenceApplier."""

from macprefs.api.plan.ApplicationPlan import ApplicationPlan
from macprefs.api.plan.Directive import Directive
from macprefs.api.plan.PreferenceApplier import PreferenceApplier
from macprefs.api.plan.RestartTarget import RestartTarget
from macprefs.api.system.PreferenceError import (
    KeyNotFound,
    KeyRejected,
    PermissionDenied,
    RestartFailed,
    StoreUnavailable,
)
from tests.unit.conftest import ScriptedSystem

DOCK = RestartTarget(name="Dock")
FINDER = RestartTarget(name="Finder")


def _plan(*directives, restart_order=(DOCK,)):
    return ApplicationPlan(name="test", directives=directives, restart_order=restart_order)


def test_single_write_scenario(scripted_system):
    plan = _plan(Directive.write("com.example.dock", "autohide", True, restarts=("Dock",)))

    result = PreferenceApplier(scripted_system).apply(plan)

    assert [o.status for o in result.outcomes] == ["applied"]
    assert result.restarted == ["Dock"]
    assert result.restarts[0].status == "restarted"
    assert result.success is True
    assert scripted_system.store[("current_user", "com.example.dock", "autohide")] is True


def test_shared_target_restarted_once_after_all_directives(scripted_system):
    plan = _plan(
        Directive.write("com.apple.dock", "autohide", True, restarts=("Dock",)),
        Directive.write("com.apple.dock", "tilesize", 1, restarts=("Dock",)),
    )

    PreferenceApplier(scripted_system).apply(plan)

    kinds = [call[0] for call in scripted_system.calls]
    assert kinds == ["write", "write", "restart"]
    assert scripted_system.restarts() == ["Dock"]


def test_restarts_follow_plan_order_not_directive_order(scripted_system):
    plan = _plan(
        Directive.write("com.apple.dock", "a", True, restarts=("Dock",)),
        Directive.write("com.apple.finder", "b", True, restarts=("Finder",)),
        restart_order=(FINDER, DOCK),
    )

    result = PreferenceApplier(scripted_system).apply(plan)

    assert result.restarted == ["Finder", "Dock"]


def test_partial_failure_isolation():
    system = ScriptedSystem(failures={("/Library/Preferences/x", "Enabled"): PermissionDenied("a password is required")})
    plan = _plan(
        Directive.write("com.apple.dock", "autohide", True),
        Directive.write("/Library/Preferences/x", "Enabled", 0, scope="system", restarts=("Finder",)),
        Directive.write("com.apple.dock", "tilesize", 1, restarts=("Dock",)),
        restart_order=(FINDER, DOCK),
    )

    result = PreferenceApplier(system).apply(plan)

    assert [o.status for o in result.outcomes] == ["applied", "failed", "applied"]
    assert result.outcomes[1].error_kind == "permission_denied"
    # Finder depended only on the failed directive
    assert result.restarted == ["Dock"]
    assert result.success is False


def test_failure_kinds_are_distinct():
    system = ScriptedSystem(
        failures={
            ("d", "perm"): PermissionDenied("denied"),
            ("d", "bad"): KeyRejected("bad value"),
            ("d", "gone"): StoreUnavailable("missing plist"),
        }
    )
    plan = _plan(
        Directive.write("d", "perm", 1),
        Directive.write("d", "bad", 1),
        Directive.write("d", "gone", 1),
    )

    result = PreferenceApplier(system).apply(plan)

    assert [o.error_kind for o in result.outcomes] == ["permission_denied", "key_rejected", "store_unavailable"]
    assert len(result.failed) == 3


def test_delete_of_absent_key_is_skipped(scripted_system):
    plan = _plan(Directive.delete("com.apple.dock", "never-written", restarts=("Dock",)))

    result = PreferenceApplier(scripted_system).apply(plan)

    assert result.outcomes[0].status == "skipped"
    assert result.outcomes[0].error_kind is None
    assert result.success is True
    # Skipped directives still count toward restarts
    assert result.restarted == ["Dock"]


def test_key_not_found_on_write_is_a_failure():
    system = ScriptedSystem(failures={("d", "k"): KeyNotFound("Domain (d) not found.")})

    result = PreferenceApplier(system).apply(_plan(Directive.write("d", "k", True)))

    assert result.outcomes[0].status == "failed"
    assert result.success is False


def test_best_effort_failure_keeps_success():
    system = ScriptedSystem(failures={("d", "sound"): KeyRejected("nope")})
    plan = _plan(
        Directive.write("d", "sound", False, required=False),
        Directive.write("d", "other", True),
    )

    result = PreferenceApplier(system).apply(plan)

    assert len(result.failed) == 1
    assert result.success is True


def test_restart_failure_makes_result_unsuccessful():
    system = ScriptedSystem(failures={"Dock": RestartFailed("killall: permission denied")})
    plan = _plan(Directive.write("com.apple.dock", "autohide", True, restarts=("Dock",)))

    result = PreferenceApplier(system).apply(plan)

    assert result.outcomes[0].status == "applied"
    assert result.restarts[0].status == "failed"
    assert result.success is False
    assert "1 failed" in result.summary()


def test_restart_of_process_not_running_is_not_a_failure():
    system = ScriptedSystem(running=set())
    plan = _plan(Directive.write("com.apple.dock", "autohide", True, restarts=("Dock",)))

    result = PreferenceApplier(system).apply(plan)

    assert result.restarts[0].status == "not_running"
    assert result.success is True


def test_idempotent_second_run(scripted_system):
    plan = _plan(
        Directive.write("com.apple.dock", "autohide", True, restarts=("Dock",)),
        Directive.delete("com.apple.dock", "tilesize", restarts=("Dock",)),
    )
    applier = PreferenceApplier(scripted_system)

    first = applier.apply(plan)
    second = applier.apply(plan)

    assert second.failed == []
    assert {o.status for o in second.outcomes} <= {"applied", "skipped"}
    assert second.restarted == first.restarted == ["Dock"]


def test_progress_reports_every_step(scripted_system):
    steps = []
    plan = _plan(
        Directive.write("com.apple.dock", "autohide", True, restarts=("Dock",)),
        Directive.write("com.apple.dock", "tilesize", 1, restarts=("Dock",)),
    )

    PreferenceApplier(scripted_system, progress=lambda fraction, message: steps.append((fraction, message))).apply(plan)

    assert len(steps) == 3
    assert steps[-1] == (1.0, "restarted: Dock")
    assert [fraction for fraction, _ in steps] == sorted(fraction for fraction, _ in steps)


def test_summary_counts(scripted_system):
    plan = _plan(
        Directive.write("com.apple.dock", "autohide", True, restarts=("Dock",)),
        Directive.delete("com.apple.dock", "absent"),
    )

    result = PreferenceApplier(scripted_system).apply(plan)

    assert result.summary() == "Plan 'test': 1 applied, 1 skipped, 0 failed; 1 restart(s)"
