"""PlanCatalog - built-in plans plus user plan files."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ._plans import BUILTIN_PLANS
from .ApplicationPlan import ApplicationPlan
from .load_plan_file import load_plan_file

BUILTIN_SOURCE = "builtin"


@dataclass
class PlanCatalog:
    """Every plan available by name, with where each came from.

    User plans are `*.json` files in the plans directory. A user plan may not
    reuse the name or alias of another plan; such files are reported in
    `errors` and left out, as are files that fail to parse.
    """

    plans: dict[str, ApplicationPlan] = field(default_factory=dict)
    sources: dict[str, str] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)

    @classmethod
    def load(cls, plans_dir: Path | None = None) -> "PlanCatalog":
        catalog = cls()
        for factory in BUILTIN_PLANS.values():
            catalog._add(factory(), BUILTIN_SOURCE)

        if plans_dir is None or not plans_dir.is_dir():
            return catalog

        for path in sorted(plans_dir.glob("*.json")):
            try:
                plan = load_plan_file(path)
            except ValueError as e:
                catalog.errors.append(str(e))
                continue
            clashes = [name for name in (plan.name, *plan.aliases) if catalog._resolve(name) is not None]
            if clashes:
                catalog.errors.append(f"Plan file {path} reuses existing plan names {clashes}; ignored")
                continue
            catalog._add(plan, str(path))
        return catalog

    def _add(self, plan: ApplicationPlan, source: str) -> None:
        self.plans[plan.name] = plan
        self.sources[plan.name] = source

    def _resolve(self, name: str) -> ApplicationPlan | None:
        if name in self.plans:
            return self.plans[name]
        for plan in self.plans.values():
            if name in plan.aliases:
                return plan
        return None

    def get(self, name: str) -> ApplicationPlan:
        """Resolve a plan by name or alias.

        Raises:
            KeyError: If no plan has that name or alias
        """
        plan = self._resolve(name)
        if plan is None:
            raise KeyError(f"Unknown plan: {name!r} (available: {self.names()})")
        return plan

    def names(self) -> list[str]:
        return list(self.plans.keys())

    def to_output(self) -> list[dict[str, Any]]:
        return [
            {
                "name": plan.name,
                "aliases": list(plan.aliases),
                "description": plan.description,
                "source": self.sources[plan.name],
                "directives": len(plan.directives),
                "restart_order": [target.name for target in plan.restart_order],
            }
            for plan in self.plans.values()
        ]
