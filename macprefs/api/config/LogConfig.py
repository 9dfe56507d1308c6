"""Log configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LogConfig(BaseModel):
    """Log file configuration."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("INFO", description="Logging level")
    file: str = Field("macprefs.log", description="Log file, relative to the macprefs home unless absolute")
    max_bytes: int = Field(1024 * 1024, gt=0, description="Rotate the log file at this size")
    backup_count: int = Field(3, ge=0, description="Number of rotated log files kept")
