"""Controller that keeps the package browser lists in step with the model."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from PySide6.QtCore import QObject, SignalInstance

from ....config import PACKAGE_SORT_CAPTIONS, RELEASE_SORT_CAPTIONS
from ....errors import SyncStateError
from ....models.package_info import PackageInfo, ReleaseInfo
from ....utils.formatting import fmt_safe, wrap_with_color
from ...event_manager import EventManager, EventQueueMode, EventToken
from ...performance_monitor import performance_monitor
from ..models.list_types import DisplayItem, ListType, ViewState
from ..models.package_manager_model import PackageManagerModel
from ..package_manager_view import PackageManagerView
from ..palette import Theme
from .sort_fields import ordered, sort_key_for

logger = logging.getLogger(__name__)


class ModelViewSyncer(QObject):
    """Rebuild every list panel once per tick after the model or view changes.

    All change signals are funnelled through an :class:`EventManager`, so any
    number of them firing between two :meth:`update` calls produces a single
    :meth:`refresh_lists` pass.
    """

    def __init__(
        self,
        model: PackageManagerModel,
        view: PackageManagerView,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._model = model
        self._view = view
        self._event_manager = EventManager()
        self._connections: List[Tuple[SignalInstance, EventToken]] = []
        self._initialized = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def initialize(self) -> None:
        """Wire every change source and schedule the first refresh."""

        if self._initialized:
            raise SyncStateError("ModelViewSyncer.initialize() called twice")
        self._initialized = True

        self._subscribe(self._model.pluginItemsChanged)
        self._subscribe(self._model.assetItemsChanged)
        self._subscribe(self._model.packagesChanged)
        self._subscribe(self._model.releasesChanged)

        self._subscribe(self._view.viewStateChanged)

        for package_list in self._view.lists:
            self._subscribe(package_list.sortDescendingChanged)
            self._subscribe(package_list.sortMethodChanged)

        # Plugin and asset lists only ever sort by name, so they keep the
        # sort pane hidden.
        release_list = self._view.get_list(ListType.RELEASE)
        release_list.show_sort_pane = True
        release_list.sort_method_captions = list(RELEASE_SORT_CAPTIONS)

        package_list = self._view.get_list(ListType.PACKAGE)
        package_list.show_sort_pane = True
        package_list.sort_method_captions = list(PACKAGE_SORT_CAPTIONS)

        self._event_manager.trigger(self.refresh_lists)
        logger.debug("Model/view syncer wired %d signals", len(self._connections))

    def dispose(self) -> None:
        """Disconnect everything :meth:`initialize` wired.

        Refreshes still pending are dropped, since the view may already be
        going away.  Raises :class:`~pkgBrowser.errors.EventWiringError` if a
        wiring was left behind.
        """

        if not self._initialized:
            return

        connections, self._connections = self._connections, []
        for signal, token in connections:
            signal.disconnect(self._event_manager.remove(token))

        self._initialized = False
        self._event_manager.clear_pending()
        if performance_monitor.is_enabled():
            performance_monitor.log_report()
        self._event_manager.assert_is_empty()

    def update(self) -> None:
        """Run the refresh if anything changed since the previous call.

        Call this once per host frame.
        """

        self._event_manager.flush()

    def _subscribe(self, signal: SignalInstance) -> None:
        token = self._event_manager.add(self.refresh_lists, EventQueueMode.LATEST_ONLY)
        signal.connect(token)
        self._connections.append((signal, token))

    # ------------------------------------------------------------------
    # Refresh
    # ------------------------------------------------------------------
    @performance_monitor.measure("sync.refresh_lists")
    def refresh_lists(self) -> None:
        """Re-sort and re-caption all four lists and hand them to the view."""

        model = self._model

        releases = self._build_items(ListType.RELEASE, model.releases, self._release_item)
        plugin_items = self._build_items(
            ListType.PLUGIN_ITEM, model.plugin_items, self._project_item
        )
        asset_items = self._build_items(
            ListType.ASSET_ITEM, model.asset_items, self._project_item
        )
        packages = self._build_items(ListType.PACKAGE, model.packages, self._package_item)

        self._view.set_list_items(ListType.RELEASE, releases)
        self._view.set_list_items(ListType.PLUGIN_ITEM, plugin_items)
        self._view.set_list_items(ListType.ASSET_ITEM, asset_items)
        self._view.set_list_items(ListType.PACKAGE, packages)

        logger.debug(
            "Refreshed lists: %d releases, %d packages, %d plugin items, %d asset items",
            len(releases),
            len(packages),
            len(plugin_items),
            len(asset_items),
        )

    def _build_items(
        self,
        list_type: ListType,
        source: Sequence,
        make_item: Callable[[object], DisplayItem],
    ) -> List[DisplayItem]:
        package_list = self._view.get_list(list_type)
        key = sort_key_for(list_type, package_list.sort_method)
        return [make_item(entry) for entry in ordered(source, key, package_list.sort_descending)]

    # ------------------------------------------------------------------
    # Captions
    # ------------------------------------------------------------------
    @property
    def _theme(self) -> Theme:
        return self._view.skin.theme

    def _project_item(self, name: str) -> DisplayItem:
        # The view state may lag behind while the panels animate between
        # modes, so it is only used as a hint here.
        if self._view.view_state == ViewState.PACKAGES_AND_PROJECT:
            caption = wrap_with_color(name, self._theme.draggable_item_already_added_color)
        else:
            caption = name
        return DisplayItem(caption=caption, model=name)

    def _release_item(self, info: ReleaseInfo) -> DisplayItem:
        theme = self._theme

        if self._model.is_release_installed(info):
            caption = wrap_with_color(info.name, theme.draggable_item_already_added_color)
        else:
            caption = info.name

        if info.version:
            caption = fmt_safe(
                "{0} {1}", caption, wrap_with_color("v" + info.version, theme.version_color)
            )

        return DisplayItem(caption=caption, model=info)

    def _package_item(self, info: PackageInfo) -> DisplayItem:
        theme = self._theme

        if self._view.view_state == ViewState.RELEASES_AND_PACKAGES:
            release_info = info.install_info.release_info
            if release_info.name:
                version_suffix = (
                    wrap_with_color(" v" + release_info.version, theme.version_color)
                    if release_info.version
                    else ""
                )
                caption = fmt_safe(
                    "{0} ({1}{2})",
                    info.name,
                    wrap_with_color(release_info.name, theme.draggable_item_already_added_color),
                    version_suffix,
                )
            else:
                caption = info.name
        elif self._model.is_package_added_to_project(info.name):
            caption = wrap_with_color(info.name, theme.draggable_item_already_added_color)
        else:
            caption = info.name

        return DisplayItem(caption=caption, model=info)
