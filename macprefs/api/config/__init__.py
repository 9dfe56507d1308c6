"""Config API module."""

from .._output_schemas.config import ConfigShowOutput

__all__ = ["ConfigShowOutput"]
