"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command."""

    section: str = Field(..., description="Requested section, empty string when listing sections")
    content: dict[str, Any] = Field(..., description="Section content or {'sections': [...]}")
    config_path: str = Field(..., description="Path to the config file")
    config_exists: bool = Field(..., description="Whether the config file exists (defaults are used otherwise)")


register_output_schema("config", "show", ConfigShowOutput)
