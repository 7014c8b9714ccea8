"""Colour theme used to decorate list captions."""

from __future__ import annotations

from dataclasses import dataclass, field

from ...config import DEFAULT_ALREADY_ADDED_COLOR_HEX, DEFAULT_VERSION_COLOR_HEX


@dataclass(frozen=True)
class Theme:
    """Hex colours the view uses for caption markup."""

    # Items that already exist at the drop target (installed release, package
    # already in the project, and so on).
    draggable_item_already_added_color: str = DEFAULT_ALREADY_ADDED_COLOR_HEX
    # The ``vX.Y`` suffix appended to release captions.
    version_color: str = DEFAULT_VERSION_COLOR_HEX


@dataclass(frozen=True)
class Skin:
    theme: Theme = field(default_factory=Theme)


DEFAULT_THEME = Theme()
DEFAULT_SKIN = Skin(DEFAULT_THEME)


__all__ = [
    "DEFAULT_SKIN",
    "DEFAULT_THEME",
    "Skin",
    "Theme",
]
