"""API module for mrsetup.

Each domain package exposes ``cmd_*`` functions returning a StageResult.
The CLI layer is a thin wrapper around these functions.
"""

__all__ = []
