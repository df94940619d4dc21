"""Skill Routes"""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Request

from src.application.dispatch import SkillDispatcher

router = APIRouter()


def get_skill(request: Request) -> SkillDispatcher:
    """起動時に構築したスキルを取得"""
    return request.app.state.skill


@router.post("/alexa")
async def handle_skill_request(
    request: Request,
    event: dict[str, Any] = Body(...),
) -> dict[str, Any]:
    """
    リクエストエンベロープを1ターン分処理

    Lambda と同じエンベロープを受け取り、レスポンスエンベロープを返す。
    """
    return await get_skill(request).invoke(event)
