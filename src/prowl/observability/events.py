"""Event model for route loading.

Every step of a scan that matters to an operator produces an event:

- ``DirectoryScanned``: a directory was listed
- ``ModuleMounted``: a route module passed validation and was mounted
- ``ModuleSkipped``: a route module was rejected (bad shape or failed import)
- ``ScanCompleted``: the whole tree was walked

All events are frozen dataclasses with a ``timestamp_ns`` field holding a
monotonic nanosecond timestamp.

"""

import time
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DirectoryScanned:
    """A directory was listed during a scan.

    Attributes:
        path: Absolute path to the directory.
        entries: Number of entries in the listing (before exclusion).
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    entries: int
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class ModuleMounted:
    """A route module was mounted on the application.

    Attributes:
        path: Absolute path to the route module.
        mount_url: URL the module's router was mounted under.
        route_count: Number of distinct route URLs the module contributed.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    mount_url: str
    route_count: int
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class ModuleSkipped:
    """A route module was rejected and not mounted.

    Attributes:
        path: Absolute path to the route module.
        reason: Why the module was rejected.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    reason: str
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class ScanCompleted:
    """A scan of the routes folder finished.

    Attributes:
        source: Absolute path to the routes folder.
        modules: Number of modules mounted.
        routes: Number of routes registered.
        duration_ms: Wall time of the scan in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    source: str
    modules: int
    routes: int
    duration_ms: float
    timestamp_ns: int


type LoaderEvent = DirectoryScanned | ModuleMounted | ModuleSkipped | ScanCompleted


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
