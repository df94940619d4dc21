"""In-Memory Attributes Repository"""
from __future__ import annotations

import copy
from typing import Any

import structlog

from src.application.ports.repositories import IAttributesRepository
from src.domain.memo.entities import AttributeBag
from src.domain.skill.errors import PersistenceFailure

logger = structlog.get_logger()


class InMemoryAttributesRepository(IAttributesRepository):
    """
    In-Memory Attributes Repository（ローカル実行・テスト用）

    保存時・取得時ともにコピーを渡し、保存済みの状態が外から書き換わらないようにする。
    """

    def __init__(self, initial: dict[str, dict[str, Any]] | None = None):
        self._items: dict[str, dict[str, Any]] = {
            user_id: copy.deepcopy(attributes)
            for user_id, attributes in (initial or {}).items()
        }
        self.save_count = 0

    async def load(self, user_id: str) -> AttributeBag:
        try:
            return AttributeBag.from_dict(self._items.get(user_id))
        except ValueError as e:
            logger.error("attributes_corrupted", user_id=user_id, error=str(e))
            raise PersistenceFailure("load", user_id, str(e)) from e

    async def save(self, user_id: str, bag: AttributeBag) -> None:
        self._items[user_id] = bag.to_dict()
        self.save_count += 1
        logger.info("attributes_saved", user_id=user_id, backend="memory")

    def snapshot(self, user_id: str) -> dict[str, Any] | None:
        """保存済みの属性を取得（コピー）"""
        stored = self._items.get(user_id)
        return copy.deepcopy(stored)
