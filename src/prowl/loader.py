"""Route loader — the entry point that ties configuration, scanning and state together.

``load()`` is the one-call API::

    import prowl
    from chirp import App

    app = App()
    loader = prowl.load(app, routes_folder="routes", prefix="/api")
    for record in loader.loaded_routes:
        print(record.name, record.route, record.methods)

Each ``RouteLoader`` owns its registry and event log.  Calling ``load()``
again builds a new loader, so records never leak between scans.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from prowl._errors import ConfigError
from prowl.config import LoaderConfig
from prowl.mount import as_mountable
from prowl.observability.events import ScanCompleted, now_ns
from prowl.observability.log import EventLog
from prowl.routes.registrar import import_router_module
from prowl.routes.registry import RouteRegistry
from prowl.routes.scanner import scan

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from prowl._types import LoggerLike, ModuleCallback, ModuleReader
    from prowl.observability.events import ModuleSkipped
    from prowl.routes.registry import ModuleRecord, RouteRecord


class RouteLoader:
    """Scans a routes folder into an application and keeps the results.

    Args:
        config: Loader settings.
        reader: Imports a route file; defaults to an ``importlib`` loader.
        events: Event log to record into; a new one is created if omitted.

    """

    __slots__ = ("config", "events", "reader", "registry")

    def __init__(
        self,
        config: LoaderConfig,
        *,
        reader: ModuleReader | None = None,
        events: EventLog | None = None,
    ) -> None:
        self.config = config
        self.reader: ModuleReader = reader or import_router_module
        self.events = events if events is not None else EventLog()
        self.registry = RouteRegistry()

    @property
    def loaded_routes(self) -> tuple[RouteRecord, ...]:
        return self.registry.loaded_routes

    @property
    def loaded_modules(self) -> tuple[ModuleRecord, ...]:
        return self.registry.loaded_modules

    @property
    def skipped_modules(self) -> tuple[ModuleSkipped, ...]:
        """Route modules the scan rejected, with the reason, in scan order."""
        return tuple(self.events.skipped())

    def load(self, app: object, callback: ModuleCallback | None = None) -> RouteLoader:
        """Mount every valid route module under the routes folder onto *app*.

        Raises:
            ConfigError: If the routes folder does not exist.  Nothing is
                mounted in that case.
            RouteModuleError: If a route module fails to import and
                ``config.strict_imports`` is set.

        """
        config = self.config
        config.logger.info("Route loader settings have been loaded: %s", config)

        root = config.routes_folder
        if not root.is_dir():
            msg = (
                f"Invalid routes folder path: {root}, "
                "the loader can not load routes from a nonexistent folder."
            )
            config.logger.error(msg)
            raise ConfigError(msg)

        mountable = as_mountable(app)
        start = time.perf_counter()
        scan(mountable, config, self.registry, callback, reader=self.reader, events=self.events)
        duration_ms = (time.perf_counter() - start) * 1000

        self.events.append(ScanCompleted(
            source=str(root),
            modules=len(self.registry.loaded_modules),
            routes=len(self.registry),
            duration_ms=duration_ms,
            timestamp_ns=now_ns(),
        ))
        return self

    def reset(self) -> None:
        """Forget every loaded route, module and event."""
        self.registry.reset()
        self.events.clear()


def load(
    app: object,
    *,
    routes_folder: str | Path | None = None,
    prefix: str = "",
    exclusions: str | Iterable[str] = (),
    logger: LoggerLike | None = None,
    callback: ModuleCallback | None = None,
    config: LoaderConfig | None = None,
    reader: ModuleReader | None = None,
) -> RouteLoader:
    """Scan a routes folder and mount its route modules onto *app*.

    Args:
        app: Host application: anything with ``use(mount_path, router)``, or
            a Chirp ``App``.
        routes_folder: Folder to scan.  Defaults to ``<cwd>/routes``; relative
            paths are resolved against the working directory.
        prefix: Prefix prepended to every URL.
        exclusions: File or directory names (or regular expressions) to skip.
            A single string is one exclusion.
        logger: Logger to use; defaults to ``logging.getLogger("prowl")``.
        callback: Called with each mounted ``RouterModule``.
        config: Prebuilt configuration, e.g. from ``load_config()``.  When
            given, the keyword settings above are ignored.
        reader: Custom route file importer.

    Returns:
        The ``RouteLoader`` holding the loaded routes and modules.

    """
    if config is None:
        settings: dict[str, object] = {"prefix": prefix, "exclusions": exclusions}
        if routes_folder is not None:
            settings["routes_folder"] = routes_folder
        if logger is not None:
            settings["logger"] = logger
        config = LoaderConfig(**settings)  # type: ignore[arg-type]

    return RouteLoader(config, reader=reader).load(app, callback)
