"""macprefs - declarative macOS preference plans."""

__version__ = "0.1.0"
