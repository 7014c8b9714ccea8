"""Default configuration values for pkgBrowser."""

from __future__ import annotations

from typing import Final

# Interval used by :class:`~pkgBrowser.gui.frame_ticker.FrameTicker` when the
# host has no frame callback of its own.  Roughly one refresh per 60 Hz frame.
SYNC_TICK_INTERVAL_MS: Final[int] = 16

# Recomputes slower than this are reported by the performance monitor.
SLOW_REFRESH_THRESHOLD_MS: Final[float] = 50.0

# ---------------------------------------------------------------------------
# Caption decoration colours
# ---------------------------------------------------------------------------

DEFAULT_ALREADY_ADDED_COLOR_HEX: Final[str] = "#6a9f4b"
DEFAULT_VERSION_COLOR_HEX: Final[str] = "#8a8a8a"

# ---------------------------------------------------------------------------
# Sort pane captions
# ---------------------------------------------------------------------------

# These must stay in the same order as ``ReleasesSortMethod``.
RELEASE_SORT_CAPTIONS: Final[tuple[str, ...]] = (
    "Order By Name",
    "Order By File Modification Time",
    "Order By Size",
    "Order By Release Date",
)

# These must stay in the same order as ``PackagesSortMethod``.
PACKAGE_SORT_CAPTIONS: Final[tuple[str, ...]] = (
    "Order By Name",
    "Order By Install Date",
    "Order By Release Publish Date",
)
