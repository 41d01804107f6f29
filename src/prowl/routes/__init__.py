"""Route discovery, naming and registration.

Walks a routes folder, imports each module, validates its router and
records every route it declares.

Public API::

    from prowl.routes import Router, RouteRegistry, scan

    router = Router()
    registry = RouteRegistry()
    scan(app, config, registry)
"""

from prowl.routes.registrar import (
    Compatible,
    Incompatible,
    RouterModule,
    handle_router_file,
    import_router_module,
    validate_router,
)
from prowl.routes.registry import ModuleRecord, RouteRecord, RouteRegistry
from prowl.routes.router import Layer, Router, RouteSpec
from prowl.routes.scanner import DEFAULT_EXCLUSIONS, is_excluded, scan

__all__ = [
    "DEFAULT_EXCLUSIONS",
    "Compatible",
    "Incompatible",
    "Layer",
    "ModuleRecord",
    "RouteRecord",
    "RouteRegistry",
    "RouteSpec",
    "Router",
    "RouterModule",
    "handle_router_file",
    "import_router_module",
    "is_excluded",
    "scan",
    "validate_router",
]
