"""Snippet simulator package."""

from .dispatcher import run  # noqa: F401
from .api import (  # noqa: F401
    execute_snippet,
    handle_execute,
    handle_scan_image,
)
