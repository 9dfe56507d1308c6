"""Per-directive outcome."""

from dataclasses import dataclass
from typing import Any, Literal

from .Directive import Directive

OutcomeStatus = Literal["applied", "skipped", "failed"]


@dataclass(frozen=True)
class DirectiveOutcome:
    directive: Directive
    status: OutcomeStatus
    error_kind: str | None = None
    message: str = ""

    @property
    def failed(self) -> bool:
        return self.status == "failed"

    def to_output(self) -> dict[str, Any]:
        return {
            "domain": self.directive.domain,
            "key": self.directive.key,
            "action": self.directive.action,
            "scope": self.directive.scope,
            "required": self.directive.required,
            "status": self.status,
            "error_kind": self.error_kind,
            "message": self.message,
        }
