"""Route registry — the records a loader has produced.

One ``RouteRegistry`` belongs to one ``RouteLoader``.  Nothing here is
process-wide: a fresh loader starts from an empty registry and ``reset()``
empties an existing one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from prowl._types import HttpMethod, RoutePath


@dataclass(slots=True)
class RouteRecord:
    """A distinct route URL and every method registered against it.

    Attributes:
        id: uuid5 of ``route`` in the URL namespace.
        name: Generated name (e.g. ``get_users_by_id``).
        route: Full URL including prefix and mount URL.
        parameters: ``:param`` names in ``route``, in order.
        methods: Lower-case HTTP methods, in registration order.
        module_path: Route module that first declared the URL.
        mount_url: Mount URL of that module.

    """

    id: str
    name: str
    route: RoutePath
    parameters: tuple[str, ...]
    methods: list[HttpMethod] = field(default_factory=list)
    module_path: Path | None = None
    mount_url: str = "/"

    def add_method(self, method: HttpMethod) -> None:
        if method not in self.methods:
            self.methods.append(method)


@dataclass(frozen=True, slots=True)
class ModuleRecord:
    """A route module that was mounted."""

    module_path: Path
    mount_url: str


class RouteRegistry:
    """Ordered store of route and module records, keyed by route id."""

    __slots__ = ("_modules", "_routes")

    def __init__(self) -> None:
        self._routes: dict[str, RouteRecord] = {}
        self._modules: list[ModuleRecord] = []

    def get(self, route_id: str) -> RouteRecord | None:
        return self._routes.get(route_id)

    def add_route(self, record: RouteRecord) -> None:
        self._routes[record.id] = record

    def add_module(self, record: ModuleRecord) -> None:
        self._modules.append(record)

    @property
    def loaded_routes(self) -> tuple[RouteRecord, ...]:
        """Route records in the order their URLs were first seen."""
        return tuple(self._routes.values())

    @property
    def loaded_modules(self) -> tuple[ModuleRecord, ...]:
        """Module records in mount order."""
        return tuple(self._modules)

    def reset(self) -> None:
        """Forget every record."""
        self._routes.clear()
        self._modules.clear()

    def __len__(self) -> int:
        return len(self._routes)
