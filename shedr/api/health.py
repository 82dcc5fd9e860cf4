# shedr/api/health.py

# Health check endpoint.
# /healthz → liveness only; the service holds no database or upstream connection to check.

from fastapi import APIRouter

router = APIRouter()


@router.get("/healthz")
async def healthz():
    return {"ok": True}
