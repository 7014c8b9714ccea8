"""View-side state of the package browser: view mode, skin and list panels."""

from __future__ import annotations

from typing import Optional, Sequence

from PySide6.QtCore import QObject, Signal

from .models.list_types import DisplayItem, ListType, ViewState
from .models.package_list import PackageList
from .palette import DEFAULT_SKIN, Skin


class PackageManagerView(QObject):
    """Expose the list panels and display mode the sync layer writes to.

    Rendering is left to whatever widgets observe this object.
    """

    viewStateChanged = Signal()

    def __init__(
        self,
        *,
        skin: Skin = DEFAULT_SKIN,
        view_state: ViewState = ViewState.PROJECT,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._skin = skin
        self._view_state = view_state
        self._lists = {list_type: PackageList(list_type, self) for list_type in ListType}

    @property
    def skin(self) -> Skin:
        return self._skin

    @property
    def view_state(self) -> ViewState:
        return self._view_state

    def set_view_state(self, state: ViewState) -> None:
        if state == self._view_state:
            return
        self._view_state = state
        self.viewStateChanged.emit()

    @property
    def lists(self) -> tuple[PackageList, ...]:
        return tuple(self._lists.values())

    def get_list(self, list_type: ListType) -> PackageList:
        return self._lists[list_type]

    def set_list_items(self, list_type: ListType, items: Sequence[DisplayItem]) -> None:
        self.get_list(list_type).set_items(items)
