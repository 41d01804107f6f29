"""Event log for one route loader.

Keeps the events of a scan in the order they were recorded, so a caller can
replay what happened to each directory and file.  The CLI uses it to report
modules that were skipped.

The log is bounded (oldest events drop first) and guarded by a lock, so a
debug endpoint may read it while a scan appends to it.
"""

from __future__ import annotations

import threading
from collections import deque
from pathlib import Path
from typing import TYPE_CHECKING

from prowl.observability.events import ModuleSkipped

if TYPE_CHECKING:
    from collections.abc import Iterator

    from prowl.observability.events import LoaderEvent


class EventLog:
    """Scan events in recording order.

    Args:
        max_events: Maximum number of events to retain.

    """

    __slots__ = ("_events", "_lock")

    def __init__(self, max_events: int = 10_000) -> None:
        self._events: deque[LoaderEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def append(self, event: LoaderEvent) -> None:
        with self._lock:
            self._events.append(event)

    def query(
        self,
        *,
        event_type: type | None = None,
        path: str | Path | None = None,
    ) -> list[LoaderEvent]:
        """Events matching every given filter, oldest first.

        *path* selects events about one file or directory and is compared
        with the event's ``path`` exactly.
        """
        wanted = str(path) if path is not None else None
        return [
            event
            for event in self
            if (event_type is None or isinstance(event, event_type))
            and (wanted is None or getattr(event, "path", None) == wanted)
        ]

    def skipped(self) -> list[ModuleSkipped]:
        """Modules rejected during the scan, in scan order."""
        return [event for event in self if isinstance(event, ModuleSkipped)]

    def clear(self) -> None:
        with self._lock:
            self._events.clear()

    def __iter__(self) -> Iterator[LoaderEvent]:
        with self._lock:
            snapshot = list(self._events)
        return iter(snapshot)

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
