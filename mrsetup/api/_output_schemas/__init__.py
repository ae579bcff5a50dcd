"""Output schemas for API commands - enforces consistent output structure.

Importing this package registers every schema with the registry.
"""

from . import (  # noqa: F401
    binary,
    colima,
    config,
    deps,
    logs,
    prereq,
    service,
    setup,
    shell,
    uninstall,
    verify,
)
from ._registry import get_output_schema

__all__ = ["get_output_schema"]
