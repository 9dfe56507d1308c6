"""Output schemas for plan commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class PlanListOutput(BaseOutputSchema):
    """Output schema for plan list command."""

    plans: list[dict[str, Any]] = Field(..., description="Available plans with name, aliases, source and size")
    plans_dir: str = Field(..., description="Directory searched for user plan files")


class PlanShowOutput(BaseOutputSchema):
    """Output schema for plan show command."""

    name: str = Field(..., description="Plan name, empty string if not found")
    description: str = Field(..., description="Plan description, empty string if not found")
    directives: list[dict[str, Any]] = Field(..., description="Ordered directives")
    restart_order: list[dict[str, Any]] = Field(..., description="Fixed restart order")


class PlanApplyOutput(BaseOutputSchema):
    """Output schema for plan apply command.

    All fields must always be present for consistency.
    """

    plan: str = Field(..., description="Name of the applied plan, empty string if not resolved")
    backend: str = Field(..., description="System backend type used (e.g., 'darwin', 'sandbox')")
    outcomes: list[dict[str, Any]] = Field(..., description="Per-directive outcomes in plan order")
    restarts: list[dict[str, Any]] = Field(..., description="Restarts performed in restart order")
    applied: int = Field(..., description="Number of applied directives")
    skipped: int = Field(..., description="Number of skipped directives")
    failed: int = Field(..., description="Number of failed directives")


register_output_schema("plan", "list", PlanListOutput)
register_output_schema("plan", "show", PlanShowOutput)
register_output_schema("plan", "apply", PlanApplyOutput)
