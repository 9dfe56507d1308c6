"""Load a user plan from a JSON file."""

import json
from pathlib import Path

from pydantic import ValidationError

from .ApplicationPlan import ApplicationPlan


def load_plan_file(path: Path) -> ApplicationPlan:
    """Parse a JSON plan file.

    The document has the shape of ApplicationPlan, for example::

        {
            "name": "quiet-finder",
            "directives": [
                {"domain": "com.apple.finder", "key": "FinderSounds", "action": "write",
                 "value": false, "restarts": ["Finder"]}
            ],
            "restart_order": [{"name": "Finder"}]
        }

    Raises:
        ValueError: If the file is unreadable, not JSON, or not a valid plan
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ValueError(f"Cannot read plan file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in plan file {path}: {e}") from e

    try:
        return ApplicationPlan.model_validate(raw)
    except ValidationError as e:
        error_list = e.errors() or [{"msg": str(e), "loc": ()}]
        first = error_list[0]
        loc = ".".join(str(x) for x in first.get("loc", ()))
        detail = f"{loc}: {first.get('msg', str(e))}" if loc else first.get("msg", str(e))
        raise ValueError(f"Invalid plan file {path}: {detail}") from e
