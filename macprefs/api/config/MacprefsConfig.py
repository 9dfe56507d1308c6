"""Top-level macprefs configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import CONFIG_FILE_NAME
from ...utils.get_home_dir import get_home_dir
from ..system.SystemConfig import SystemConfig
from .LogConfig import LogConfig
from .PlansConfig import PlansConfig


class MacprefsConfig(BaseModel):
    """Top-level configuration: system backend, user plans and logging."""

    model_config = ConfigDict(extra="forbid")

    system: SystemConfig = Field(default_factory=SystemConfig.default)
    plans: PlansConfig = Field(default_factory=PlansConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        return get_home_dir(CONFIG_FILE_NAME)

    @staticmethod
    def _under_home(value: str) -> Path:
        path = Path(value).expanduser()
        return path if path.is_absolute() else get_home_dir(value)

    @property
    def plans_dir(self) -> Path:
        return self._under_home(self.plans.directory)

    @property
    def log_file(self) -> Path:
        return self._under_home(self.log.file)

    @classmethod
    def load(cls) -> "MacprefsConfig":
        """Load and validate config from file.

        A missing file yields the defaults for the current platform; every
        section is optional.

        Raises:
            ValueError: If the file is not valid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return {
            "system": self.system.model_dump(),
            "plans": self.plans.model_dump(),
            "log": self.log.model_dump(),
        }

    def save(self) -> None:
        """Save the configuration to its JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = self.get_config_path()
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
