import logging

import pytest

pytest.importorskip("PySide6", reason="PySide6 is required", exc_type=ImportError)

from pkgBrowser.gui.performance_monitor import PerformanceMonitor


def test_disabled_monitor_collects_nothing() -> None:
    monitor = PerformanceMonitor(enabled=False)

    @monitor.measure("op")
    def work() -> int:
        return 3

    assert work() == 3
    assert monitor.get_stats("op") is None


def test_enabled_monitor_records_samples() -> None:
    monitor = PerformanceMonitor(enabled=True)

    @monitor.measure("op")
    def work() -> None:
        pass

    for _ in range(3):
        work()

    stats = monitor.get_stats("op")
    assert stats is not None
    assert stats["count"] == 3
    assert stats["total_count"] == 3
    assert stats["min"] <= stats["mean"] <= stats["max"]

    monitor.reset()
    assert monitor.get_stats("op") is None


def test_slow_operations_are_reported(caplog) -> None:
    monitor = PerformanceMonitor(enabled=False, slow_threshold_ms=-1.0)
    reported: list[str] = []
    monitor.slowOperationDetected.connect(lambda name, _ms: reported.append(name))

    @monitor.measure("sync.refresh_lists")
    def work() -> None:
        pass

    with caplog.at_level(logging.WARNING, logger="pkgBrowser.gui.performance_monitor"):
        work()

    assert reported == ["sync.refresh_lists"]
    assert "sync.refresh_lists took" in caplog.text


def test_exceptions_still_propagate() -> None:
    monitor = PerformanceMonitor(enabled=True)

    @monitor.measure("op")
    def work() -> None:
        raise ValueError("bad")

    with pytest.raises(ValueError):
        work()
    assert monitor.get_stats("op")["count"] == 1


def test_log_report_summarises_each_operation(caplog) -> None:
    monitor = PerformanceMonitor(enabled=True)

    @monitor.measure("sync.refresh_lists")
    def work() -> None:
        pass

    work()
    work()
    with caplog.at_level(logging.INFO, logger="pkgBrowser.gui.performance_monitor"):
        monitor.log_report()

    assert "sync.refresh_lists: 2 samples (total 2)" in caplog.text


def test_log_report_without_samples(caplog) -> None:
    monitor = PerformanceMonitor(enabled=True)
    with caplog.at_level(logging.INFO, logger="pkgBrowser.gui.performance_monitor"):
        monitor.log_report()
    assert "No refresh timings collected." in caplog.text
