"""State backing a single list panel of the package browser."""

from __future__ import annotations

from typing import Optional, Sequence

from PySide6.QtCore import QObject, Signal

from .list_types import DisplayItem, ListType


class PackageList(QObject):
    """Hold the sort selection and displayed rows of one list panel.

    The sort method and direction are changed by the user through the sort
    pane; everything else is written by the synchronisation layer.
    """

    sortDescendingChanged = Signal()
    sortMethodChanged = Signal()

    def __init__(self, list_type: ListType, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._list_type = list_type
        self._sort_method = 0
        self._sort_descending = False
        self._show_sort_pane = False
        self._sort_method_captions: list[str] = []
        self._items: list[DisplayItem] = []

    @property
    def list_type(self) -> ListType:
        return self._list_type

    # ------------------------------------------------------------------
    # User controlled sort state
    # ------------------------------------------------------------------
    @property
    def sort_method(self) -> int:
        return self._sort_method

    def set_sort_method(self, method: int) -> None:
        method = int(method)
        if method == self._sort_method:
            return
        self._sort_method = method
        self.sortMethodChanged.emit()

    @property
    def sort_descending(self) -> bool:
        return self._sort_descending

    def set_sort_descending(self, descending: bool) -> None:
        descending = bool(descending)
        if descending == self._sort_descending:
            return
        self._sort_descending = descending
        self.sortDescendingChanged.emit()

    # ------------------------------------------------------------------
    # Sort pane configuration
    # ------------------------------------------------------------------
    @property
    def show_sort_pane(self) -> bool:
        return self._show_sort_pane

    @show_sort_pane.setter
    def show_sort_pane(self, visible: bool) -> None:
        self._show_sort_pane = bool(visible)

    @property
    def sort_method_captions(self) -> list[str]:
        return list(self._sort_method_captions)

    @sort_method_captions.setter
    def sort_method_captions(self, captions: Sequence[str]) -> None:
        self._sort_method_captions = list(captions)

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------
    @property
    def items(self) -> list[DisplayItem]:
        return list(self._items)

    def set_items(self, items: Sequence[DisplayItem]) -> None:
        """Replace every displayed row with *items*."""

        self._items = list(items)
