"""Models and value types backing the package browser panels."""

from .list_types import (
    DisplayItem,
    ListType,
    PackagesSortMethod,
    ReleasesSortMethod,
    ViewState,
)
from .package_list import PackageList
from .package_manager_model import PackageManagerModel

__all__ = [
    "DisplayItem",
    "ListType",
    "PackageList",
    "PackageManagerModel",
    "PackagesSortMethod",
    "ReleasesSortMethod",
    "ViewState",
]
