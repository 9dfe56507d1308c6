"""Per-target restart outcome."""

from dataclasses import dataclass
from typing import Any, Literal

RestartStatus = Literal["restarted", "not_running", "failed"]


@dataclass(frozen=True)
class RestartOutcome:
    target: str
    status: RestartStatus
    message: str = ""

    @property
    def failed(self) -> bool:
        return self.status == "failed"

    def to_output(self) -> dict[str, Any]:
        return {"target": self.target, "status": self.status, "message": self.message}
