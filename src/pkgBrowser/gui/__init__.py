"""Qt-facing layer of pkgBrowser."""

from .event_manager import EventManager, EventQueueMode
from .frame_ticker import FrameTicker

__all__ = ["EventManager", "EventQueueMode", "FrameTicker"]
