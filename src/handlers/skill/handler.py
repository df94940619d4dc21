"""
Memo Skill Lambda Handler

音声プラットフォームから届くリクエストエンベロープを1ターン分処理する。
ディスパッチテーブルはモジュール読み込み時（プロセス起動時）に一度だけ構築する。
"""
import asyncio
from typing import Any

import structlog

from src.application.dispatch import SkillDispatcher
from src.infrastructure.config import configure_logging, get_settings
from src.presentation.skill import build_skill

logger = structlog.get_logger()

settings = get_settings()
configure_logging(settings.log_level)

skill: SkillDispatcher = build_skill(settings)


def handle(dispatcher: SkillDispatcher, event: dict, context: Any = None) -> dict:
    """与えられたスキルで1ターンを処理"""
    request = event.get("request") if isinstance(event, dict) else None
    aws_request_id = getattr(context, "aws_request_id", None)

    with structlog.contextvars.bound_contextvars(aws_request_id=aws_request_id):
        logger.info(
            "lambda_invoked",
            request_type=request.get("type") if isinstance(request, dict) else None,
        )

        loop = asyncio.new_event_loop()
        try:
            return loop.run_until_complete(dispatcher.invoke(event))
        finally:
            loop.close()


def lambda_handler(event: dict, context: Any) -> dict:
    """Lambda エントリポイント"""
    return handle(skill, event, context)
