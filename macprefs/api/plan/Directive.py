"""Directive - one atomic preference mutation."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..system.PreferenceValue import PreferenceValue
from ..system.Scope import Scope

Action = Literal["write", "delete"]


class Directive(BaseModel):
    """Write or delete one key in a domain of a preference store tier.

    A delete carries no value; a write always carries one. Whether the value
    type matches what the key expects is left to the store.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    domain: str = Field(..., min_length=1, description="Preference domain, or a plist path for system scope")
    key: str = Field(..., min_length=1, description="Setting name within the domain")
    action: Action = Field(..., description="'write' or 'delete'")
    value: PreferenceValue | None = Field(None, description="Typed value, present iff action is 'write'")
    scope: Scope = Field("current_user", description="Store tier: current_user, current_host or system")
    required: bool = Field(True, description="False marks the directive best-effort")
    restarts: tuple[str, ...] = Field((), description="Restart targets that depend on this directive")

    @model_validator(mode="after")
    def validate_value_matches_action(self) -> "Directive":
        if self.action == "write" and self.value is None:
            raise ValueError(f"write of {self.domain} {self.key} requires a value")
        if self.action == "delete" and self.value is not None:
            raise ValueError(f"delete of {self.domain} {self.key} must not carry a value")
        return self

    @classmethod
    def write(cls, domain: str, key: str, value: Any, **kwargs: Any) -> "Directive":
        return cls(domain=domain, key=key, action="write", value=value, **kwargs)

    @classmethod
    def delete(cls, domain: str, key: str, **kwargs: Any) -> "Directive":
        return cls(domain=domain, key=key, action="delete", **kwargs)

    @property
    def requires_elevation(self) -> bool:
        return self.scope == "system"

    @property
    def value_type(self) -> str:
        """Tag of the value: bool, int, float or string (empty for deletes)."""
        # bool first: bool subclasses int
        if self.value is None:
            return ""
        if isinstance(self.value, bool):
            return "bool"
        if isinstance(self.value, int):
            return "int"
        if isinstance(self.value, float):
            return "float"
        return "string"

    def describe(self) -> str:
        """Human-readable form, close to the equivalent `defaults` invocation."""
        host = "-currentHost " if self.scope == "current_host" else ""
        sudo = "sudo " if self.requires_elevation else ""
        if self.action == "delete":
            return f"{sudo}defaults {host}delete {self.domain} {self.key}"
        value = str(self.value).lower() if isinstance(self.value, bool) else self.value
        return f"{sudo}defaults {host}write {self.domain} {self.key} -{self.value_type} {value}"

    def to_output(self) -> dict[str, Any]:
        output = self.model_dump(mode="json")
        output["restarts"] = list(self.restarts)
        output["value_type"] = self.value_type
        return output
