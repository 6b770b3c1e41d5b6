# app/adapters/api/routers/health.py
from fastapi import APIRouter

from app.shared.config import settings

router = APIRouter(prefix="/health", tags=["Health"])

@router.get("/ready", summary="Readiness Probe")
async def ready() -> dict:
    """The renderer has no external dependencies; if we answer, we are ready."""
    return {"status": "ok", "app": settings.APP_NAME, "env": settings.ENV}
