"""Delete Memos Use Case"""
from __future__ import annotations

from dataclasses import dataclass

import structlog

from src.application.ports.repositories import IAttributesRepository
from src.domain.memo import MemoOutcome, state_machine

logger = structlog.get_logger()


@dataclass
class DeleteMemosInput:
    """削除入力DTO"""

    user_id: str


@dataclass
class DeleteMemosOutput:
    """削除出力DTO"""

    outcome: MemoOutcome
    deleted_count: int


class DeleteMemosUseCase:
    """
    メモ全削除 ユースケース

    削除の粒度は全件のみ。個別削除は提供しない。
    """

    def __init__(self, attributes_repository: IAttributesRepository):
        self._attributes_repo = attributes_repository

    async def execute(self, input_data: DeleteMemosInput) -> DeleteMemosOutput:
        """ユースケースを実行"""
        log = logger.bind(user_id=input_data.user_id)
        log.info("delete_memos_started")

        bag = await self._attributes_repo.load(input_data.user_id)
        deleted_count = state_machine.count(bag)
        await self._attributes_repo.save(input_data.user_id, state_machine.delete_all(bag))

        log.info("memos_deleted", deleted_count=deleted_count)

        return DeleteMemosOutput(outcome=MemoOutcome.DELETED, deleted_count=deleted_count)
