"""PreferenceApplier - applies a plan to a preference store, then restarts services."""

from collections.abc import Callable

from ...utils.get_logger import get_logger
from ..system._AbstractImpl import _AbstractImpl
from ..system.PreferenceError import KeyNotFound, PreferenceError
from ..system.System import System
from .ApplicationPlan import ApplicationPlan
from .ApplyResult import ApplyResult
from .Directive import Directive
from .DirectiveOutcome import DirectiveOutcome
from .RestartOutcome import RestartOutcome

logger = get_logger("plan.applier")

ProgressFn = Callable[[float, str], None]


class PreferenceApplier:
    """Apply every directive of a plan in order, then restart each touched target once.

    A failing directive is recorded and never stops the run. Only targets of
    applied or skipped directives are restarted. Nothing is retried: the plan is
    idempotent, so re-running it is the recovery path.

    Args:
        system: Entered System (or any backend implementation) to act on
        progress: Optional callback receiving (fraction, message) after each step
    """

    def __init__(self, system: System | _AbstractImpl, progress: ProgressFn | None = None):
        self.system = system
        self.progress = progress

    def _report(self, done: int, total: int, message: str) -> None:
        if self.progress is not None:
            self.progress(done / total if total else 1.0, message)

    def _apply_directive(self, directive: Directive) -> DirectiveOutcome:
        try:
            if directive.action == "write":
                self.system.write(directive.domain, directive.key, directive.value, directive.scope)
            else:
                self.system.delete(directive.domain, directive.key, directive.scope)
        except KeyNotFound as e:
            # Deletes are idempotent: an absent key is already in the target state
            if directive.action == "delete":
                logger.info("Skipped %s (already absent)", directive.describe())
                return DirectiveOutcome(directive, "skipped", message=str(e))
            logger.warning("Failed %s: %s", directive.describe(), e)
            return DirectiveOutcome(directive, "failed", error_kind="store_unavailable", message=str(e))
        except PreferenceError as e:
            logger.warning("Failed %s: %s: %s", directive.describe(), e.kind, e)
            return DirectiveOutcome(directive, "failed", error_kind=e.kind, message=str(e))

        logger.info("Applied %s", directive.describe())
        return DirectiveOutcome(directive, "applied")

    def apply(self, plan: ApplicationPlan) -> ApplyResult:
        result = ApplyResult(plan=plan.name)
        total = len(plan.directives) + len(plan.restart_order)
        done = 0

        logger.info("Applying plan '%s' (%d directives)", plan.name, len(plan.directives))
        for directive in plan.directives:
            outcome = self._apply_directive(directive)
            result.outcomes.append(outcome)
            done += 1
            self._report(done, total, f"{outcome.status}: {directive.domain} {directive.key}")

        effective = [outcome.directive for outcome in result.outcomes if not outcome.failed]
        targets = plan.restart_targets_for(effective)
        # Remaining steps shrink to the restarts actually needed
        total = done + len(targets)

        for target in targets:
            try:
                was_running = self.system.restart(target.name, relaunch=target.relaunch)
            except PreferenceError as e:
                logger.warning("Restart of %s failed: %s", target.name, e)
                restart = RestartOutcome(target.name, "failed", message=str(e))
            else:
                status = "restarted" if was_running else "not_running"
                logger.info("Restart of %s: %s", target.name, status)
                restart = RestartOutcome(target.name, status)
            result.restarts.append(restart)
            done += 1
            self._report(done, total, f"{restart.status}: {target.name}")

        logger.info(result.summary())
        return result
