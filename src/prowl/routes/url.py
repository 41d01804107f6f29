"""URL helpers — derive mount URLs, parameters, ids and names for routes.

All functions are pure string utilities with no I/O::

    path_to_url(root, root / "api/users/index.py")  -> "/api/users"
    build_url("/api/", "users/", "/:id")            -> "/api/users/:id/"
    get_url_parameters("/users/:id/posts/:postId")  -> ("id", "postId")
    route_name("get", "/users/:id/")                -> "get_users_by_id"

"""

import re
import uuid
from pathlib import Path

# Express-style path parameter: ``:name``
_PARAM_RE = re.compile(r":(\w+)")

# Segment name used for the root URL
_ROOT_NAME = "root"


def path_to_url(root_folder: Path, file_path: Path) -> str:
    """Convert a file's directory, relative to *root_folder*, into a URL.

    The file name itself is dropped; a file directly inside *root_folder*
    maps to ``/``.

    """
    relative = Path(file_path).relative_to(root_folder).parent
    if relative == Path("."):
        return "/"
    return "/" + relative.as_posix()


def get_url_parameters(url: str) -> tuple[str, ...]:
    """Return the ``:param`` names in *url*, in order of occurrence."""
    return tuple(match.group(1) for match in _PARAM_RE.finditer(url))


def build_url(*segments: str) -> str:
    """Join URL segments into a single normalised URL.

    Each segment loses one leading slash and gains exactly one trailing
    slash.  Segments equal to ``/`` contribute nothing.

    """
    url = "/"
    for segment in segments:
        if segment == "/":
            continue
        if not segment.endswith("/"):
            segment += "/"
        if segment.startswith("/"):
            segment = segment[1:]
        url += segment
    return url


def mount_path(prefix: str, mount_url: str) -> str:
    """Path a router is mounted at on the host application.

    ``mount_path("/api", "/users")`` -> ``/api/users``

    """
    return build_url(prefix, mount_url).rstrip("/") or "/"


def route_id(url: str) -> str:
    """Stable identity for a route URL (uuid5 in the URL namespace)."""
    return str(uuid.uuid5(uuid.NAMESPACE_URL, url))


def route_name(method: str, url: str) -> str:
    """Human-readable route name built from its method and URL.

    Parameter segments are dropped from the path part; the last parameter,
    if any, is appended as ``_by_<param>``.

    """
    segments = [s for s in url.split("/") if s and not s.startswith(":")]
    if not segments and url.strip("/") == "":
        segments = [_ROOT_NAME]
    name = "_".join([method.lower(), *segments])
    parameters = get_url_parameters(url)
    if parameters:
        name += f"_by_{parameters[-1]}"
    return name
