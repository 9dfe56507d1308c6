"""macOS system backend configuration data."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Data(BaseModel):
    """Paths of the macOS tools used to change preferences and restart services."""

    model_config = ConfigDict(extra="forbid")

    defaults_path: str = Field("/usr/bin/defaults", description="Path to the defaults tool")
    killall_path: str = Field("/usr/bin/killall", description="Path to the killall tool")
    open_path: str = Field("/usr/bin/open", description="Path to the open tool (used to relaunch apps)")
    elevate_command: list[str] = Field(
        default_factory=lambda: ["sudo", "-n"],
        description="Command prefix for system-scope operations; empty list disables elevation",
    )

    @field_validator("defaults_path", "killall_path", "open_path")
    @classmethod
    def validate_tool_path(cls, v: str) -> str:
        if not v:
            raise ValueError("system.data tool paths must not be empty when system.type is 'darwin'")
        return v

    @field_validator("elevate_command")
    @classmethod
    def validate_elevate_command(cls, v: list[str]) -> list[str]:
        if any(not part for part in v):
            raise ValueError(f"system.data.elevate_command must not contain empty arguments, got: {v!r}")
        return v
