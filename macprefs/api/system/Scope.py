"""Preference store tiers a directive can target."""

from typing import Literal

Scope = Literal["current_user", "current_host", "system"]

SCOPES: tuple[str, ...] = ("current_user", "current_host", "system")
