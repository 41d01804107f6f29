"""Shared type definitions for prowl."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from pathlib import Path
    from types import ModuleType

    from prowl.routes.registrar import RouterModule
    from prowl.routes.router import Router

# Route URL path (e.g., "/users/:id/")
type RoutePath = str

# Lower-case HTTP method name (e.g., "get")
type HttpMethod = str

# Handler callable attached to a router layer
type HandlerFunc = Callable[..., Any]

# Fired once per mounted route module
type ModuleCallback = Callable[[RouterModule], object]

# Imports a route file: (file_path, module_name) -> module
type ModuleReader = Callable[[Path, str], ModuleType]


class MountableApp(Protocol):
    """Host application capable of mounting a router under a path."""

    def use(self, mount_path: str, router: Router) -> object: ...


class LoggerLike(Protocol):
    """Subset of ``logging.Logger`` used by the loader."""

    def debug(self, msg: str, *args: object) -> None: ...

    def info(self, msg: str, *args: object) -> None: ...

    def warning(self, msg: str, *args: object) -> None: ...

    def error(self, msg: str, *args: object) -> None: ...
