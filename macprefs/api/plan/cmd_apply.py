"""Plan apply command - write the plan's preferences and restart affected services."""

from collections.abc import Iterator

from ..config.MacprefsConfig import MacprefsConfig
from ..StageResult import StageResult
from ..system.System import System
from . import PlanApplyOutput
from .PlanCatalog import PlanCatalog
from .PreferenceApplier import PreferenceApplier


def _error_output(message: str, plan: str = "", backend: str = "") -> dict:
    return PlanApplyOutput(
        errors=[message],
        warnings=[],
        plan=plan,
        backend=backend,
        outcomes=[],
        restarts=[],
        applied=0,
        skipped=0,
        failed=0,
    ).model_dump(mode="python")


def cmd_apply(name: str) -> StageResult:
    """Apply a named plan.

    Every directive is attempted even if some fail; success is false when a
    required directive or a restart failed.

    Args:
        name: Plan name or alias
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.05, "Loading configuration...")
        try:
            config = MacprefsConfig.load()
            plan = PlanCatalog.load(config.plans_dir).get(name)
        except (KeyError, ValueError) as e:
            message = e.args[0] if isinstance(e, KeyError) else str(e)
            yield (1.0, "Complete")
            result_obj.result = f"Error: {message}"
            result_obj.output = _error_output(message)
            result_obj.success = False
            return

        backend = config.system.type
        steps: list[tuple[float, str]] = []

        def record(fraction: float, message: str) -> None:
            steps.append((fraction, message))

        yield (0.1, f"Applying {len(plan.directives)} directive(s) with {backend} backend...")
        with System(config.system) as system:
            result = PreferenceApplier(system, progress=record).apply(plan)
        # Applying is fast and synchronous; progress is replayed once it finishes
        for fraction, message in steps:
            yield (0.1 + 0.9 * fraction, message)

        warnings = [
            f"{outcome.directive.domain} {outcome.directive.key}: {outcome.message}"
            for outcome in result.failed
            if not outcome.directive.required
        ]
        errors = [
            f"{outcome.directive.domain} {outcome.directive.key}: {outcome.error_kind}: {outcome.message}"
            for outcome in result.failed
            if outcome.directive.required
        ]
        errors += [f"restart {restart.target}: {restart.message}" for restart in result.restarts if restart.failed]

        result_obj.result = result.summary()
        result_obj.output = PlanApplyOutput(
            errors=errors,
            warnings=warnings,
            plan=plan.name,
            backend=backend,
            outcomes=[outcome.to_output() for outcome in result.outcomes],
            restarts=[restart.to_output() for restart in result.restarts],
            applied=len(result.applied),
            skipped=len(result.skipped),
            failed=len(result.failed),
        ).model_dump(mode="python")
        result_obj.success = result.success

    return StageResult(announce=f"Applying plan '{name}'...", progress_callback=do_work)
