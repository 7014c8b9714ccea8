"""Plain data records consumed by the synchronisation layer."""

from .package_info import AssetStoreInfo, PackageInfo, PackageInstallInfo, ReleaseInfo

__all__ = [
    "AssetStoreInfo",
    "PackageInfo",
    "PackageInstallInfo",
    "ReleaseInfo",
]
