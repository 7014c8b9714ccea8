"""Sort key selection for the package browser lists.

Each sortable list type maps its sort-method enumeration onto a key function.
Plugin and asset items are plain strings and always sort by themselves.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Type, TypeVar

from ....errors import ProgrammingError, UnknownSortMethodError
from ....models.package_info import PackageInfo, ReleaseInfo
from ..models.list_types import ListType, PackagesSortMethod, ReleasesSortMethod

T = TypeVar("T")
SortKey = Callable[[object], object]


RELEASE_SORT_FIELDS: Dict[ReleasesSortMethod, Callable[[ReleaseInfo], object]] = {
    ReleasesSortMethod.NAME: lambda info: info.name,
    ReleasesSortMethod.FILE_MODIFICATION_DATE: lambda info: info.file_modification_date_ticks,
    ReleasesSortMethod.SIZE: lambda info: info.compressed_size,
    ReleasesSortMethod.RELEASE_DATE: lambda info: info.asset_store_info.publish_date_ticks,
}

PACKAGE_SORT_FIELDS: Dict[PackagesSortMethod, Callable[[PackageInfo], object]] = {
    PackagesSortMethod.NAME: lambda info: info.name,
    PackagesSortMethod.INSTALL_DATE: lambda info: info.install_info.install_date_ticks,
    PackagesSortMethod.RELEASE_PUBLISH_DATE: (
        lambda info: info.install_info.release_info.asset_store_info.publish_date_ticks
    ),
}

_SORT_TABLES: Dict[ListType, tuple[Type[int], Dict]] = {
    ListType.RELEASE: (ReleasesSortMethod, RELEASE_SORT_FIELDS),
    ListType.PACKAGE: (PackagesSortMethod, PACKAGE_SORT_FIELDS),
}


_BY_VALUE_LIST_TYPES = frozenset({ListType.PLUGIN_ITEM, ListType.ASSET_ITEM})


def _by_value(item: str) -> str:
    return item


def sort_key_for(list_type: ListType, sort_method: int) -> SortKey:
    """Return the key function *list_type* should be ordered by.

    Raises :class:`UnknownSortMethodError` when *sort_method* is not a member
    of the list's sort-method enumeration, and :class:`ProgrammingError` for
    anything that is not a known list type.
    """

    if list_type in _BY_VALUE_LIST_TYPES:
        return _by_value

    table_entry = _SORT_TABLES.get(list_type)
    if table_entry is None:
        raise ProgrammingError(f"No sort fields are defined for list type {list_type!r}")

    enum_type, fields = table_entry
    try:
        method = enum_type(sort_method)
    except ValueError:
        raise UnknownSortMethodError(
            f"{sort_method!r} is not a valid {enum_type.__name__} for the {list_type.value} list"
        ) from None
    return fields[method]


def ordered(items: Optional[Iterable[T]], key: SortKey, descending: bool) -> List[T]:
    """Return *items* stably sorted by *key*.

    Equal keys keep their source order in both directions.
    """

    if items is None:
        raise ProgrammingError("Cannot order a missing source collection")
    return sorted(items, key=key, reverse=descending)
