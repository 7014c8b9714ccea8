"""Package browser view state, models and controllers."""

from .package_manager_view import PackageManagerView
from .palette import DEFAULT_SKIN, DEFAULT_THEME, Skin, Theme

__all__ = [
    "DEFAULT_SKIN",
    "DEFAULT_THEME",
    "PackageManagerView",
    "Skin",
    "Theme",
]
