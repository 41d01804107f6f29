"""Prowl — filesystem route auto-loading for Chirp applications.

Drop route modules into a ``routes/`` folder and prowl mounts each one at
the URL its location implies::

    routes/index.py          -> /
    routes/users/index.py    -> /users
    routes/api/v1/items.py   -> /api/v1

Quick start::

    # routes/users/index.py
    from prowl import Router

    router = Router()

    @router.get("/:id")
    async def show(request): ...

    # app.py
    import prowl
    from chirp import App

    app = App()
    loader = prowl.load(app, prefix="/api")
    loader.loaded_routes   # RouteRecord(name="get_api_users_by_id", ...)

"""

__version__ = "0.1.0-dev"
__all__ = [
    "LoaderConfig",
    "RouteLoader",
    "Router",
    "__version__",
    "load",
    "load_config",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import prowl`` cheap for route modules that only need ``Router``.
    """
    if name == "Router":
        from prowl.routes.router import Router

        return Router

    if name == "LoaderConfig":
        from prowl.config import LoaderConfig

        return LoaderConfig

    if name == "load_config":
        from prowl.config_loader import load_config

        return load_config

    if name == "RouteLoader":
        from prowl.loader import RouteLoader

        return RouteLoader

    if name == "load":
        from prowl.loader import load

        return load

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
