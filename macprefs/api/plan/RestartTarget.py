"""RestartTarget - a service restarted so preference changes take effect."""

from pydantic import BaseModel, ConfigDict, Field


class RestartTarget(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1, description="Process name passed to killall")
    relaunch: bool = Field(False, description="Reopen after terminating; False when the OS relaunches it")
