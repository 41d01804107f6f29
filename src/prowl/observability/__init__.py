"""Loader observability — a structured record of what a scan did.

Quick Start:
    >>> from prowl.observability import ModuleMounted
    >>> loader = prowl.load(app)
    >>> loader.events.query(event_type=ModuleMounted)
    >>> loader.skipped_modules

"""

from prowl.observability.events import (
    DirectoryScanned,
    LoaderEvent,
    ModuleMounted,
    ModuleSkipped,
    ScanCompleted,
    now_ns,
)
from prowl.observability.log import EventLog

__all__ = [
    "DirectoryScanned",
    "EventLog",
    "LoaderEvent",
    "ModuleMounted",
    "ModuleSkipped",
    "ScanCompleted",
    "now_ns",
]
