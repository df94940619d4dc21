"""Health Check Routes"""
from fastapi import APIRouter, Request

from src.infrastructure.config import get_settings

router = APIRouter()


@router.get("/health")
async def health_check() -> dict:
    """ヘルスチェック"""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.service_name,
        "environment": settings.environment,
    }


@router.get("/ready")
async def readiness_check(request: Request) -> dict:
    """レディネスチェック"""
    skill = request.app.state.skill
    return {
        "status": "ready",
        "checks": {
            "request_handlers": len(skill.request_handlers),
            "error_handlers": len(skill.error_handlers),
        },
    }
