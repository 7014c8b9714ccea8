"""Utility helpers shared across pkgBrowser."""

from .formatting import fmt_safe, wrap_with_color
from .logging import get_logger

__all__ = ["fmt_safe", "get_logger", "wrap_with_color"]
