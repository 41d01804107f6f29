"""Route registrar — import, validate and mount a single route module.

A route module is compatible when its ``router`` attribute (configurable)
has a non-empty ``stack`` list whose every layer carries a ``route`` with a
``path`` string and a non-empty ``methods`` collection.  Anything else
rejects the whole module; there is no partial acceptance.

For each accepted module:

    routes/users/index.py   -> mounted at /users
    @router.get("/:id")     -> route /users/:id/, name get_users_by_id

Routes resolving to an URL that is already registered merge their method
into the existing record instead of creating a new one.
"""

from __future__ import annotations

import importlib.util
import sys
from collections.abc import Mapping, Set
from dataclasses import dataclass
from typing import TYPE_CHECKING

from prowl._errors import RouteModuleError
from prowl.observability.events import ModuleMounted, ModuleSkipped, now_ns
from prowl.routes.registry import ModuleRecord, RouteRecord
from prowl.routes.url import (
    build_url,
    get_url_parameters,
    mount_path,
    path_to_url,
    route_id,
    route_name,
)

if TYPE_CHECKING:
    from pathlib import Path
    from types import ModuleType

    from prowl._types import HttpMethod, ModuleCallback, ModuleReader, MountableApp
    from prowl.config import LoaderConfig
    from prowl.observability.log import EventLog
    from prowl.routes.registry import RouteRegistry

# Package name imported route modules are registered under in sys.modules
_MODULE_NAMESPACE = "prowl_routes"

# Unordered method collections are listed in this order, then alphabetically
_METHOD_ORDER = ("get", "post", "put", "patch", "delete", "head", "options")


@dataclass(frozen=True, slots=True)
class Compatible:
    """The module exposes a usable router."""

    router: object


@dataclass(frozen=True, slots=True)
class Incompatible:
    """The module was rejected.

    Attributes:
        reason: Which check failed.
        detail: The offending value, for the log.

    """

    reason: str
    detail: object = None


type Validation = Compatible | Incompatible


@dataclass(frozen=True, slots=True)
class RouterModule:
    """A mounted route module, as passed to the per-module callback.

    Attributes:
        instance: The imported Python module.
        router: The module's router.
        path: Absolute filesystem path of the module.
        mount_url: URL the router was mounted under (without prefix).
        routes: Records for the URLs the module declares.

    """

    instance: ModuleType
    router: object
    path: Path
    mount_url: str
    routes: tuple[RouteRecord, ...]


def import_router_module(py_file: Path, module_name: str) -> ModuleType:
    """Import a Python file as a module without touching ``sys.path``.

    Raises:
        RouteModuleError: If the file cannot be loaded or raises on import.

    """
    spec = importlib.util.spec_from_file_location(module_name, py_file)
    if spec is None or spec.loader is None:
        msg = f"Cannot load route module {py_file}"
        raise RouteModuleError(msg)

    try:
        module = importlib.util.module_from_spec(spec)
        # Registered before exec so the module can look itself up by name
        sys.modules[module_name] = module
        spec.loader.exec_module(module)
    except Exception as exc:
        sys.modules.pop(module_name, None)
        msg = f"Failed to load route module {py_file}: {exc}"
        raise RouteModuleError(msg) from exc

    return module


def module_name_for(py_file: Path, routes_folder: Path) -> str:
    """Dotted module name for a route file: ``api/users.py`` -> ``prowl_routes.api.users``."""
    relative = py_file.relative_to(routes_folder).with_suffix("")
    return ".".join([_MODULE_NAMESPACE, *relative.parts])


def layer_methods(route: object) -> tuple[HttpMethod, ...]:
    """Lower-case methods declared by a layer's route.

    Accepts a sequence or set of names, or a mapping of name to flag (only
    truthy flags count).

    """
    methods = getattr(route, "methods", None)
    if isinstance(methods, Mapping):
        names = [name for name, enabled in methods.items() if enabled]
    elif isinstance(methods, str):
        names = [methods]
    elif isinstance(methods, Set):
        names = sorted((str(name).lower() for name in methods), key=_method_sort_key)
    else:
        try:
            names = list(methods)  # type: ignore[arg-type]
        except TypeError:
            return ()
    return tuple(dict.fromkeys(str(name).lower() for name in names))


def _method_sort_key(method: str) -> tuple[int, str]:
    if method in _METHOD_ORDER:
        return _METHOD_ORDER.index(method), method
    return len(_METHOD_ORDER), method


def _is_compatible_layer(layer: object) -> bool:
    route = getattr(layer, "route", None)
    if route is None:
        return False
    if not isinstance(getattr(route, "path", None), str):
        return False
    return bool(layer_methods(route))


def validate_router(module: object, router_attr: str = "router") -> Validation:
    """Check that *module* exposes a router the loader can mount."""
    router = getattr(module, router_attr, None)
    if router is None:
        return Incompatible(f"module has no {router_attr!r} attribute")

    stack = getattr(router, "stack", None)
    if not isinstance(stack, list):
        return Incompatible("stack is not a list", stack)
    if not stack:
        return Incompatible("stack is empty", stack)
    if not all(_is_compatible_layer(layer) for layer in stack):
        return Incompatible("stack elements' structure is incompatible", stack)

    return Compatible(router)


def _record_skip(py_file: Path, reason: str, events: EventLog | None) -> None:
    if events is not None:
        events.append(ModuleSkipped(path=str(py_file), reason=reason, timestamp_ns=now_ns()))


def handle_router_file(
    app: MountableApp,
    config: LoaderConfig,
    py_file: Path,
    registry: RouteRegistry,
    callback: ModuleCallback | None = None,
    *,
    reader: ModuleReader = import_router_module,
    events: EventLog | None = None,
) -> RouterModule | None:
    """Import, validate and mount one route module.

    Returns the mounted ``RouterModule``, or *None* if the module was
    rejected.

    Raises:
        RouteModuleError: If the module fails to import and
            ``config.strict_imports`` is set.

    """
    try:
        module = reader(py_file, module_name_for(py_file, config.routes_folder))
    except RouteModuleError as exc:
        if config.strict_imports:
            raise
        config.logger.warning(
            "Module at %s could not be imported and has been skipped: %s", py_file, exc,
        )
        _record_skip(py_file, f"import failed: {exc}", events)
        return None

    result = validate_router(module, config.router_attr)
    if isinstance(result, Incompatible):
        config.logger.warning(
            "Module at %s is not compatible and has been skipped: %s",
            py_file, result.reason,
        )
        _record_skip(py_file, result.reason, events)
        return None

    router = result.router
    mount_url = path_to_url(config.routes_folder, py_file)
    app.use(mount_path(config.prefix, mount_url), router)  # type: ignore[arg-type]

    module_routes: dict[str, RouteRecord] = {}
    for layer in router.stack:  # type: ignore[attr-defined]
        spec = layer.route
        methods = layer_methods(spec)
        route = build_url(config.prefix, mount_url, spec.path)
        rid = route_id(route)

        record = registry.get(rid)
        if record is None:
            record = RouteRecord(
                id=rid,
                name=route_name(methods[0], route),
                route=route,
                parameters=get_url_parameters(route),
                module_path=py_file,
                mount_url=mount_url,
            )
            registry.add_route(record)
        for method in methods:
            record.add_method(method)
        module_routes.setdefault(rid, record)

    registry.add_module(ModuleRecord(module_path=py_file, mount_url=mount_url))

    router_module = RouterModule(
        instance=module,
        router=router,
        path=py_file,
        mount_url=mount_url,
        routes=tuple(module_routes.values()),
    )
    if callback is not None:
        callback(router_module)

    config.logger.info(
        "Router at %s has been mounted at %s: %s",
        py_file, mount_url, ", ".join(r.name for r in router_module.routes),
    )
    if events is not None:
        events.append(ModuleMounted(
            path=str(py_file),
            mount_url=mount_url,
            route_count=len(router_module.routes),
            timestamp_ns=now_ns(),
        ))
    return router_module
