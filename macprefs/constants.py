"""Shared constants for the macprefs home directory and its artefacts."""

MACPREFS_HOME_EXT = ".macprefs"  # user-level state/config directory suffix

CONFIG_FILE_NAME = "config.json"

# Default timestamp format for display
DEFAULT_TIMESTAMP_FORMAT = "%H:%M:%S"
