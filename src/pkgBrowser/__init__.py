"""pkgBrowser keeps package browser list panels in sync with their model."""

from .utils.logging import get_logger

__all__ = ["get_logger"]
__version__ = "0.1.0"
