"""Fields shared by every command output schema."""

from pydantic import BaseModel, Field


class BaseOutputSchema(BaseModel):
    # Always present, possibly empty
    errors: list[str] = Field(default_factory=list, description="Failures that made the command unsuccessful")
    warnings: list[str] = Field(default_factory=list, description="Problems that did not affect success")
