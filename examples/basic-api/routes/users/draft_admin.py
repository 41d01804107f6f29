"""Not mounted: excluded by the ``^draft_`` pattern in app.py."""

from prowl import Router

router = Router()


@router.delete("/:id")
async def purge(id: str) -> str:
    return id
