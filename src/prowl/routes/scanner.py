"""Directory scanner — walk the routes folder and hand files to the registrar.

The walk is depth-first and synchronous.  Entries are visited in sorted
order so that mount order (and therefore registry order) is reproducible.

Exclusion rules:

    .hidden.py, _private.py, __init__.py   always skipped
    users.py   with exclusion "users"      skipped (literal match on the stem)
    users.py   with exclusion "^us"        skipped (regex search on the stem)
    __pycache__/, node_modules/, ...       never entered
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from prowl.observability.events import DirectoryScanned, now_ns
from prowl.routes.registrar import handle_router_file, import_router_module

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from prowl._types import LoggerLike, ModuleCallback, ModuleReader, MountableApp
    from prowl.config import LoaderConfig
    from prowl.observability.log import EventLog
    from prowl.routes.registry import RouteRegistry

# Directory names never entered, matched literally
DEFAULT_EXCLUSIONS: frozenset[str] = frozenset({
    "__pycache__",
    "node_modules",
    "site-packages",
    "venv",
})

# Extension of files handed to the registrar
SOURCE_SUFFIX = ".py"


@dataclass(frozen=True, slots=True)
class ExclusionPattern:
    """A configured exclusion: its literal text and, if valid, its regex."""

    text: str
    regex: re.Pattern[str] | None

    def matches(self, name: str) -> bool:
        if name == self.text:
            return True
        return self.regex is not None and self.regex.search(name) is not None


def compile_exclusions(
    exclusions: Iterable[str], logger: LoggerLike | None = None,
) -> tuple[ExclusionPattern, ...]:
    """Compile exclusion strings, keeping invalid regexes as literal-only."""
    patterns: list[ExclusionPattern] = []
    for text in exclusions:
        try:
            regex: re.Pattern[str] | None = re.compile(text)
        except re.error as exc:
            regex = None
            if logger is not None:
                logger.warning(
                    "Exclusion %r is not a valid regular expression (%s); "
                    "it will only match names literally.",
                    text, exc,
                )
        patterns.append(ExclusionPattern(text=text, regex=regex))
    return tuple(patterns)


def is_excluded(
    name: str, patterns: Sequence[ExclusionPattern], *, is_dir: bool = False,
) -> bool:
    """Return True if a file or directory named *name* should be skipped.

    Files other than ``.py`` sources are never excluded here; the scanner
    ignores them separately.

    """
    if is_dir:
        if name.startswith((".", "_")) or name in DEFAULT_EXCLUSIONS:
            return True
        return any(p.matches(name) for p in patterns)

    if not name.endswith(SOURCE_SUFFIX):
        return False
    if name.startswith((".", "_")):
        return True
    stem = name.split(".")[0]
    return any(p.matches(stem) for p in patterns)


def scan(
    app: MountableApp,
    config: LoaderConfig,
    registry: RouteRegistry,
    callback: ModuleCallback | None = None,
    *,
    reader: ModuleReader = import_router_module,
    events: EventLog | None = None,
) -> None:
    """Walk ``config.routes_folder`` and mount every valid route module."""
    _scan_directory(app, config, config.routes_folder, registry, callback, reader, events)


def _scan_directory(
    app: MountableApp,
    config: LoaderConfig,
    directory: Path,
    registry: RouteRegistry,
    callback: ModuleCallback | None,
    reader: ModuleReader,
    events: EventLog | None,
) -> None:
    config.logger.info("Searching directory %s", directory)
    entries = sorted(directory.iterdir())
    if events is not None:
        events.append(DirectoryScanned(
            path=str(directory), entries=len(entries), timestamp_ns=now_ns(),
        ))

    for entry in entries:
        is_dir = entry.is_dir()
        if is_excluded(entry.name, config.patterns, is_dir=is_dir):
            continue

        if is_dir:
            _scan_directory(app, config, entry, registry, callback, reader, events)
        elif entry.suffix == SOURCE_SUFFIX:
            handle_router_file(
                app, config, entry, registry, callback, reader=reader, events=events,
            )
        else:
            config.logger.debug("Ignoring non-source file %s", entry)
