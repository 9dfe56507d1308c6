"""User plan directory configuration."""

from pydantic import BaseModel, ConfigDict, Field


class PlansConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    directory: str = Field("plans", description="Directory of *.json plan files, relative to the macprefs home unless absolute")
