"""In-memory model of the releases, packages and project items on display."""

from __future__ import annotations

from typing import Iterable, Optional

from PySide6.QtCore import QObject, Signal

from ....models.package_info import PackageInfo, ReleaseInfo


class PackageManagerModel(QObject):
    """Own the collections shown by the package browser.

    Each setter replaces a whole collection and emits the matching change
    signal.  Loading the data from disk or the network is left to the caller.
    """

    pluginItemsChanged = Signal()
    assetItemsChanged = Signal()
    packagesChanged = Signal()
    releasesChanged = Signal()

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._plugin_items: list[str] = []
        self._asset_items: list[str] = []
        self._packages: list[PackageInfo] = []
        self._releases: list[ReleaseInfo] = []
        self._project_packages: set[str] = set()

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------
    @property
    def plugin_items(self) -> list[str]:
        return list(self._plugin_items)

    def set_plugin_items(self, items: Iterable[str]) -> None:
        self._plugin_items = list(items)
        self.pluginItemsChanged.emit()

    @property
    def asset_items(self) -> list[str]:
        return list(self._asset_items)

    def set_asset_items(self, items: Iterable[str]) -> None:
        self._asset_items = list(items)
        self.assetItemsChanged.emit()

    @property
    def packages(self) -> list[PackageInfo]:
        return list(self._packages)

    def set_packages(self, packages: Iterable[PackageInfo]) -> None:
        self._packages = list(packages)
        self.packagesChanged.emit()

    @property
    def releases(self) -> list[ReleaseInfo]:
        return list(self._releases)

    def set_releases(self, releases: Iterable[ReleaseInfo]) -> None:
        self._releases = list(releases)
        self.releasesChanged.emit()

    def set_project_packages(self, names: Iterable[str]) -> None:
        """Record which packages the open project references."""

        self._project_packages = set(names)
        # Package captions depend on this set, so reuse the packages signal.
        self.packagesChanged.emit()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_release_installed(self, release: ReleaseInfo) -> bool:
        """Return ``True`` when some installed package came from *release*."""

        return any(
            package.install_info.release_info.matches(release)
            for package in self._packages
        )

    def is_package_added_to_project(self, name: str) -> bool:
        return name in self._project_packages
