"""Liveness endpoint for the webhook receiver."""

from fastapi import APIRouter

from gocardless_client.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    return {"status": "ok", "environment": settings.environment.value}
