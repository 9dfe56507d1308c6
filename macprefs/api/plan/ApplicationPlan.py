"""ApplicationPlan - ordered directives plus a fixed restart order."""

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .Directive import Directive
from .RestartTarget import RestartTarget


class ApplicationPlan(BaseModel):
    """A named, declarative set of preference changes.

    `restart_order` lists every target any directive may restart, in the order
    restarts must happen.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1, description="Plan name used on the command line")
    description: str = Field("", description="One-line summary")
    aliases: tuple[str, ...] = Field((), description="Alternative names, e.g. CLI shortcuts")
    directives: tuple[Directive, ...] = Field(..., description="Directives in application order")
    restart_order: tuple[RestartTarget, ...] = Field((), description="Fixed restart order")

    @model_validator(mode="after")
    def validate_restart_targets(self) -> "ApplicationPlan":
        names = [target.name for target in self.restart_order]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"plan {self.name!r} lists restart targets more than once: {duplicates}")
        for directive in self.directives:
            unknown = [name for name in directive.restarts if name not in names]
            if unknown:
                raise ValueError(
                    f"plan {self.name!r}: {directive.domain} {directive.key} restarts {unknown}, "
                    f"which are missing from restart_order {names}"
                )
        return self

    def restart_targets_for(self, directives: Iterable[Directive]) -> list[RestartTarget]:
        """Distinct targets referenced by `directives`, in restart order."""
        touched = {name for directive in directives for name in directive.restarts}
        return [target for target in self.restart_order if target.name in touched]

    def to_output(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "directives": [directive.to_output() for directive in self.directives],
            "restart_order": [target.model_dump(mode="json") for target in self.restart_order],
        }
