"""FastAPI Application Entry Point"""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from fastapi import FastAPI

from src.application.dispatch import SkillDispatcher
from src.infrastructure.config import Settings, configure_logging, get_settings
from src.presentation.api.routes import health_routes, skill_routes
from src.presentation.skill import build_skill

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """アプリケーションのライフサイクル管理"""
    settings = get_settings()
    logger.info(
        "application_starting",
        service=settings.service_name,
        environment=settings.environment,
        persistence_backend=settings.persistence_backend,
    )
    yield
    logger.info("application_shutting_down")


def create_app(
    settings: Settings | None = None,
    skill: SkillDispatcher | None = None,
) -> FastAPI:
    """
    FastAPI アプリケーションを作成

    スキルはここで一度だけ構築し、app.state 経由で各リクエストに渡す。
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Memo Skill",
        description="Voice assistant skill for short spoken memos",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )
    app.state.skill = skill or build_skill(settings)

    # Routes
    app.include_router(health_routes.router, tags=["Health"])
    app.include_router(skill_routes.router, tags=["Skill"])

    return app
