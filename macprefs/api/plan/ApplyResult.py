"""ApplyResult - what happened when a plan was applied."""

from dataclasses import dataclass, field

from .DirectiveOutcome import DirectiveOutcome
from .RestartOutcome import RestartOutcome


@dataclass
class ApplyResult:
    plan: str
    outcomes: list[DirectiveOutcome] = field(default_factory=list)
    restarts: list[RestartOutcome] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """False if any required directive failed or any restart failed."""
        if any(outcome.failed and outcome.directive.required for outcome in self.outcomes):
            return False
        return not any(restart.failed for restart in self.restarts)

    @property
    def applied(self) -> list[DirectiveOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status == "applied"]

    @property
    def skipped(self) -> list[DirectiveOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status == "skipped"]

    @property
    def failed(self) -> list[DirectiveOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status == "failed"]

    @property
    def restarted(self) -> list[str]:
        """Targets a restart was attempted for, in the order attempted."""
        return [restart.target for restart in self.restarts]

    def summary(self) -> str:
        failed_restarts = sum(1 for restart in self.restarts if restart.failed)
        text = (
            f"Plan '{self.plan}': {len(self.applied)} applied, {len(self.skipped)} skipped, "
            f"{len(self.failed)} failed; {len(self.restarts)} restart(s)"
        )
        if failed_restarts:
            text += f", {failed_restarts} failed"
        return text
