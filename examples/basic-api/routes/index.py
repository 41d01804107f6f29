"""Root route — mounted at /api."""

from prowl import Router

router = Router()


@router.get("/")
async def index() -> str:
    return '{"service": "basic-api"}'
