"""Host adapters — give an application the ``use(mount_path, router)`` capability.

The loader mounts routers through a single call::

    app.use("/api/users", router)

Chirp's ``App`` registers routes one at a time with ``app.route()`` and
uses ``{param}`` placeholders, so ``ChirpMount`` expands each router layer
into a Chirp route::

    router.get("/:id")  mounted at /users  ->  app.route("/users/{id}", methods=["GET"])

``RecordingApp`` only remembers what was mounted.  It backs the
``prowl routes`` dry run.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from prowl.routes.registrar import layer_methods
from prowl.routes.url import build_url, route_name

if TYPE_CHECKING:
    from chirp import App

    from prowl._types import MountableApp

_PARAM_RE = re.compile(r":(\w+)")


def to_chirp_path(url: str) -> str:
    """Convert a loader URL to a Chirp path pattern.

    ``/users/:id/`` -> ``/users/{id}``

    """
    path = _PARAM_RE.sub(r"{\1}", url)
    return path.rstrip("/") or "/"


class ChirpMount:
    """Adapts a Chirp ``App`` (not yet frozen) to ``use(mount_path, router)``.

    Args:
        app: The Chirp application routes are registered on.

    """

    __slots__ = ("_app", "_registered")

    def __init__(self, app: App) -> None:
        self._app = app
        self._registered: list[str] = []

    @property
    def app(self) -> App:
        return self._app

    @property
    def registered(self) -> tuple[str, ...]:
        """Chirp paths registered so far, in order."""
        return tuple(self._registered)

    def use(self, mount_path: str, router: Any) -> None:
        for layer in router.stack:
            methods = layer_methods(layer.route)
            url = build_url(mount_path, layer.route.path)
            path = to_chirp_path(url)
            self._app.route(
                path,
                methods=[m.upper() for m in methods],
                name=route_name(methods[0], url),
            )(layer.route.handler)
            self._registered.append(path)


class RecordingApp:
    """Records mounts without serving anything."""

    __slots__ = ("mounts",)

    def __init__(self) -> None:
        self.mounts: list[tuple[str, Any]] = []

    def use(self, mount_path: str, router: Any) -> None:
        self.mounts.append((mount_path, router))


def as_mountable(app: object) -> MountableApp:
    """Return *app* if it can mount routers, else wrap it for Chirp.

    Raises:
        TypeError: If *app* has neither ``use()`` nor ``route()``.

    """
    if callable(getattr(app, "use", None)):
        return app  # type: ignore[return-value]
    if callable(getattr(app, "route", None)):
        return ChirpMount(app)  # type: ignore[arg-type]
    msg = f"Cannot mount routers on {type(app).__name__}: expected use() or route()"
    raise TypeError(msg)
