"""Health check — mounted at /api/health."""

from prowl import Router

router = Router()


@router.get("/")
async def health() -> str:
    return '{"status": "ok"}'
