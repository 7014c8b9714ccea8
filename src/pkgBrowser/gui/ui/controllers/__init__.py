"""Controllers that keep the package browser panels up to date."""

from .model_view_syncer import ModelViewSyncer
from .sort_fields import ordered, sort_key_for

__all__ = ["ModelViewSyncer", "ordered", "sort_key_for"]
