"""Sandbox system backend configuration data."""

from pydantic import BaseModel, ConfigDict, Field


class _Data(BaseModel):
    """JSON-file preference store used off macOS, for dry runs and in tests."""

    model_config = ConfigDict(extra="forbid")

    state_file: str = Field("sandbox.json", description="State file, relative to the macprefs home unless absolute")
    elevation_available: bool = Field(True, description="Whether system-scope writes are permitted")
    running: list[str] | None = Field(
        None, description="Processes considered running; None means every process is running"
    )
