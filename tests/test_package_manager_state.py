"""Tests for the in-memory model and view state objects."""

import pytest

pytest.importorskip("PySide6", reason="PySide6 is required", exc_type=ImportError)

from pkgBrowser.gui.ui.models.list_types import DisplayItem, ListType, ViewState
from pkgBrowser.gui.ui.models.package_list import PackageList
from pkgBrowser.gui.ui.models.package_manager_model import PackageManagerModel
from pkgBrowser.gui.ui.package_manager_view import PackageManagerView
from pkgBrowser.models.package_info import PackageInfo, PackageInstallInfo, ReleaseInfo


def _counter(signal) -> list[int]:
    fired: list[int] = []
    signal.connect(lambda *args: fired.append(1))
    return fired


def test_model_setters_emit_matching_signal() -> None:
    model = PackageManagerModel()
    plugin = _counter(model.pluginItemsChanged)
    asset = _counter(model.assetItemsChanged)
    packages = _counter(model.packagesChanged)
    releases = _counter(model.releasesChanged)

    model.set_plugin_items(["p"])
    model.set_asset_items(["a"])
    model.set_releases([ReleaseInfo(name="r")])
    model.set_packages([])
    model.set_project_packages(["pkg"])

    assert (len(plugin), len(asset), len(packages), len(releases)) == (1, 1, 2, 1)
    assert model.plugin_items == ["p"]
    assert model.asset_items == ["a"]


def test_model_collections_are_copies() -> None:
    model = PackageManagerModel()
    model.set_plugin_items(["p"])
    model.plugin_items.append("q")
    assert model.plugin_items == ["p"]


def test_release_installed_matches_by_id_then_name_and_version() -> None:
    model = PackageManagerModel()
    installed = ReleaseInfo(name="Foo", version="1.0", id="foo-1")
    model.set_packages([PackageInfo("Foo", PackageInstallInfo(1, installed))])

    assert model.is_release_installed(ReleaseInfo(name="Renamed", id="foo-1"))
    assert not model.is_release_installed(ReleaseInfo(name="Foo", version="1.0", id="foo-2"))
    assert model.is_release_installed(ReleaseInfo(name="Foo", version="1.0"))
    assert not model.is_release_installed(ReleaseInfo(name="Foo", version="2.0"))


def test_package_added_to_project() -> None:
    model = PackageManagerModel()
    model.set_project_packages(["Foo"])
    assert model.is_package_added_to_project("Foo")
    assert not model.is_package_added_to_project("Bar")


def test_list_sort_signals_fire_only_on_change() -> None:
    package_list = PackageList(ListType.RELEASE)
    method = _counter(package_list.sortMethodChanged)
    descending = _counter(package_list.sortDescendingChanged)

    package_list.set_sort_method(0)
    package_list.set_sort_method(2)
    package_list.set_sort_method(2)
    package_list.set_sort_descending(False)
    package_list.set_sort_descending(True)

    assert len(method) == 1
    assert len(descending) == 1
    assert package_list.sort_method == 2
    assert package_list.sort_descending


def test_view_exposes_one_list_per_type() -> None:
    view = PackageManagerView()
    assert [package_list.list_type for package_list in view.lists] == list(ListType)
    for list_type in ListType:
        assert view.get_list(list_type).list_type is list_type


def test_view_state_signal_fires_only_on_change() -> None:
    view = PackageManagerView()
    fired = _counter(view.viewStateChanged)

    view.set_view_state(ViewState.PROJECT)
    view.set_view_state(ViewState.RELEASES_AND_PACKAGES)

    assert len(fired) == 1
    assert view.view_state is ViewState.RELEASES_AND_PACKAGES


def test_set_list_items_replaces_rows() -> None:
    view = PackageManagerView()
    view.set_list_items(ListType.ASSET_ITEM, [DisplayItem("a", "a")])
    view.set_list_items(ListType.ASSET_ITEM, [DisplayItem("b", "b")])
    assert view.get_list(ListType.ASSET_ITEM).items == [DisplayItem("b", "b")]
