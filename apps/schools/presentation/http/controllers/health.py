"""Health controller - Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(request: Request) -> dict:
    """헬스체크 엔드포인트."""
    return {"status": "healthy", "service": request.app.state.settings.service_name}


@router.get("/ping")
async def ping() -> str:
    """Ping 엔드포인트."""
    return "pong"
