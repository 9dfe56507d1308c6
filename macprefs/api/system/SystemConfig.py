"""System backend configuration with Pydantic validation."""

import platform
from typing import Any

from pydantic import BaseModel, Field, model_validator

from ._darwin._Data import _Data as _DarwinData
from ._sandbox._Data import _Data as _SandboxData

# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKEND_REGISTRY: dict[str, type[BaseModel]] = {
    "darwin": _DarwinData,
    "sandbox": _SandboxData,
}


class SystemConfig(BaseModel):
    """Preference store / service control configuration with backend-specific data."""

    type: str = Field(..., description="System backend type")
    data: BaseModel = Field(..., description="Backend-specific configuration data")

    @model_validator(mode="before")
    @classmethod
    def validate_and_populate_data(cls, values: Any) -> dict[str, Any]:
        if not isinstance(values, dict):
            raise ValueError(f"system config must be a dict, got {type(values).__name__}")
        backend_type = values.get("type")
        if not backend_type:
            raise ValueError("system.type is required")
        config_data_class = _BACKEND_REGISTRY.get(backend_type)
        if not config_data_class:
            raise ValueError(f"Unknown system type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        data = values.get("data")
        if data is None:
            data = {}
        if not isinstance(data, config_data_class):
            data = config_data_class(**data)
        return {**values, "data": data}

    @classmethod
    def default(cls) -> "SystemConfig":
        """Default backend for the running platform: darwin on macOS, sandbox elsewhere."""
        backend_type = "darwin" if platform.system() == "Darwin" else "sandbox"
        return cls(type=backend_type, data={})

    def model_dump(self, **kwargs) -> dict[str, Any]:
        """Override to properly serialize nested data model."""
        result = super().model_dump(**kwargs)
        if isinstance(self.data, BaseModel):
            result["data"] = self.data.model_dump(**kwargs)
        return result
