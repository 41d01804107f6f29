"""Router — the object route modules export.

A route module declares its routes on a module-level ``router``::

    from prowl import Router

    router = Router()

    @router.get("/")
    async def index(request): ...

    @router.route("/:id", methods=["GET", "PUT"])
    async def item(request): ...

Paths are relative to the module's mount URL, which the loader derives
from the file's location.  Declared routes are kept in ``stack`` as
ordered ``Layer`` objects, the shape the loader validates.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prowl._types import HandlerFunc, HttpMethod


@dataclass(frozen=True, slots=True)
class RouteSpec:
    """A route declared on a router.

    Attributes:
        path: Path relative to the router's mount point (e.g. ``/:id``).
        methods: Lower-case HTTP methods, in declaration order.
        handler: Callable serving the route.

    """

    path: str
    methods: tuple[HttpMethod, ...]
    handler: HandlerFunc


@dataclass(frozen=True, slots=True)
class Layer:
    """One entry of a router's stack."""

    route: RouteSpec


@dataclass(slots=True)
class Router:
    """Ordered collection of routes declared by a route module."""

    stack: list[Layer] = field(default_factory=list)

    def add(self, path: str, handler: HandlerFunc, methods: Iterable[str] = ("get",)) -> None:
        """Append a route for *handler* at *path*."""
        normalized: list[str] = []
        for method in methods:
            lowered = method.lower()
            if lowered not in normalized:
                normalized.append(lowered)
        self.stack.append(Layer(RouteSpec(path=path, methods=tuple(normalized), handler=handler)))

    def route(
        self, path: str, *, methods: Iterable[str] | None = None,
    ) -> Callable[[HandlerFunc], HandlerFunc]:
        """Register a handler via decorator.  Methods default to ``["GET"]``."""

        def decorator(func: HandlerFunc) -> HandlerFunc:
            self.add(path, func, methods or ("get",))
            return func

        return decorator

    def get(self, path: str) -> Callable[[HandlerFunc], HandlerFunc]:
        return self.route(path, methods=("get",))

    def post(self, path: str) -> Callable[[HandlerFunc], HandlerFunc]:
        return self.route(path, methods=("post",))

    def put(self, path: str) -> Callable[[HandlerFunc], HandlerFunc]:
        return self.route(path, methods=("put",))

    def delete(self, path: str) -> Callable[[HandlerFunc], HandlerFunc]:
        return self.route(path, methods=("delete",))

    def patch(self, path: str) -> Callable[[HandlerFunc], HandlerFunc]:
        return self.route(path, methods=("patch",))

    def head(self, path: str) -> Callable[[HandlerFunc], HandlerFunc]:
        return self.route(path, methods=("head",))

    def options(self, path: str) -> Callable[[HandlerFunc], HandlerFunc]:
        return self.route(path, methods=("options",))

    def __len__(self) -> int:
        return len(self.stack)
