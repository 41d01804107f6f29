"""Tests for prowl.observability — loader events and the event log."""

import threading
from pathlib import Path

import pytest

from prowl.observability.events import (
    DirectoryScanned,
    ModuleMounted,
    ModuleSkipped,
    ScanCompleted,
    now_ns,
)
from prowl.observability.log import EventLog


def _mounted(path: str = "/routes/users/index.py") -> ModuleMounted:
    return ModuleMounted(path=path, mount_url="/users", route_count=2, timestamp_ns=now_ns())


def _skipped(path: str, reason: str = "stack is empty") -> ModuleSkipped:
    return ModuleSkipped(path=path, reason=reason, timestamp_ns=now_ns())


class TestEventLog:
    """Tests for the event log store."""

    def test_append_and_len(self) -> None:
        log = EventLog()
        assert len(log) == 0
        log.append(_mounted())
        assert len(log) == 1

    def test_oldest_dropped_when_full(self) -> None:
        log = EventLog(max_events=3)
        for i in range(5):
            log.append(_mounted(f"/routes/{i}.py"))
        assert [e.path for e in log] == ["/routes/2.py", "/routes/3.py", "/routes/4.py"]

    def test_query_by_type_in_recording_order(self) -> None:
        log = EventLog()
        log.append(_skipped("/routes/a.py"))
        log.append(_mounted())
        log.append(_skipped("/routes/b.py", "stack is not a list"))
        results = log.query(event_type=ModuleSkipped)
        assert [e.path for e in results] == ["/routes/a.py", "/routes/b.py"]

    def test_query_by_path(self) -> None:
        log = EventLog()
        log.append(DirectoryScanned(path="/routes/users", entries=1, timestamp_ns=now_ns()))
        log.append(_mounted("/routes/users/index.py"))
        log.append(_mounted("/routes/items/index.py"))
        (event,) = log.query(path=Path("/routes/users/index.py"))
        assert isinstance(event, ModuleMounted)

    def test_query_path_is_exact(self) -> None:
        log = EventLog()
        log.append(DirectoryScanned(path="/routes/users", entries=1, timestamp_ns=now_ns()))
        log.append(_mounted("/routes/users/index.py"))
        assert len(log.query(path="/routes/users")) == 1

    def test_query_combines_filters(self) -> None:
        log = EventLog()
        log.append(DirectoryScanned(path="/routes/x.py", entries=0, timestamp_ns=now_ns()))
        log.append(_skipped("/routes/x.py"))
        (event,) = log.query(event_type=ModuleSkipped, path="/routes/x.py")
        assert event.reason == "stack is empty"

    def test_scan_completed_has_no_path(self) -> None:
        log = EventLog()
        log.append(ScanCompleted(
            source="/routes", modules=0, routes=0, duration_ms=1.0, timestamp_ns=now_ns(),
        ))
        assert log.query(path="/routes") == []
        assert len(log.query(event_type=ScanCompleted)) == 1

    def test_skipped(self) -> None:
        log = EventLog()
        log.append(_mounted())
        log.append(_skipped("/routes/draft.py", "module has no 'router' attribute"))
        (event,) = log.skipped()
        assert event.path == "/routes/draft.py"
        assert event.reason == "module has no 'router' attribute"

    def test_clear(self) -> None:
        log = EventLog()
        log.append(_mounted())
        log.append(_mounted())
        log.clear()
        assert len(log) == 0
        assert list(log) == []

    def test_iteration_is_a_snapshot(self) -> None:
        log = EventLog()
        log.append(_mounted())
        events = iter(log)
        log.append(_mounted())
        assert len(list(events)) == 1

    def test_concurrent_appends(self) -> None:
        log = EventLog()

        def worker() -> None:
            for _ in range(100):
                log.append(_mounted())

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(log) == 400


class TestEvents:
    def test_now_ns_monotonic(self) -> None:
        a = now_ns()
        b = now_ns()
        assert b >= a

    def test_events_frozen(self) -> None:
        event = _mounted()
        with pytest.raises(AttributeError):
            event.route_count = 3  # type: ignore[misc]
