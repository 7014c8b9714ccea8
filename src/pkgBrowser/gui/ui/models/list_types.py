"""Enumerations and value types shared by the package browser lists."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class ListType(Enum):
    """Identifies one of the four list panels."""

    RELEASE = "release"
    PACKAGE = "package"
    PLUGIN_ITEM = "plugin_item"
    ASSET_ITEM = "asset_item"


class ViewState(Enum):
    """Which pair of panels the browser currently shows."""

    PROJECT = "project"
    PACKAGES_AND_PROJECT = "packages_and_project"
    RELEASES_AND_PACKAGES = "releases_and_packages"


class ReleasesSortMethod(IntEnum):
    NAME = 0
    FILE_MODIFICATION_DATE = 1
    SIZE = 2
    RELEASE_DATE = 3


class PackagesSortMethod(IntEnum):
    NAME = 0
    INSTALL_DATE = 1
    RELEASE_PUBLISH_DATE = 2


@dataclass(frozen=True)
class DisplayItem:
    """One row handed to a list panel.

    ``caption`` is rich text ready for display and ``model`` is the record the
    row was built from.  Items are rebuilt from scratch on every refresh.
    """

    caption: str
    model: object
