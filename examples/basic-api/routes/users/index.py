"""User routes — mounted at /api/users.

GET and PUT on ``/:id`` share one registry entry, ``get_api_users_by_id``.
"""

from chirp import Request

from prowl import Router

router = Router()

_USERS: dict[str, str] = {"1": "ada", "2": "grace"}


@router.get("/")
async def list_users() -> str:
    return ", ".join(_USERS.values())


@router.get("/:id")
async def show_user(id: str) -> str:
    return _USERS.get(id, "unknown")


@router.put("/:id")
async def rename_user(request: Request, id: str) -> str:
    form = await request.form()
    _USERS[id] = str(form.get("name", _USERS.get(id, "")))
    return _USERS[id]
