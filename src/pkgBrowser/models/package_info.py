"""Read-only records describing releases and installed packages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class AssetStoreInfo:
    """Publish metadata attached to a release by the asset store."""

    publish_date_ticks: int = 0


@dataclass(frozen=True)
class ReleaseInfo:
    """A downloadable release available to the package browser."""

    name: str = ""
    version: Optional[str] = None
    id: Optional[str] = None
    file_modification_date_ticks: int = 0
    compressed_size: int = 0
    asset_store_info: AssetStoreInfo = field(default_factory=AssetStoreInfo)

    def matches(self, other: "ReleaseInfo") -> bool:
        """Return ``True`` when *other* describes the same release.

        Releases that both carry an ``id`` are compared by it; otherwise the
        name and version pair is used.
        """

        if self.id and other.id:
            return self.id == other.id
        return (self.name, self.version or "") == (other.name, other.version or "")


@dataclass(frozen=True)
class PackageInstallInfo:
    """Records which release a package was installed from, and when."""

    install_date_ticks: int = 0
    release_info: ReleaseInfo = field(default_factory=ReleaseInfo)


@dataclass(frozen=True)
class PackageInfo:
    """A package installed into the shared packages folder."""

    name: str
    install_info: PackageInstallInfo = field(default_factory=PackageInstallInfo)
