"""Create Memo Use Case"""
from __future__ import annotations

from dataclasses import dataclass

import structlog

from src.application.ports.repositories import IAttributesRepository
from src.domain.memo import state_machine

logger = structlog.get_logger()


@dataclass
class CreateMemoInput:
    """作成入力DTO"""

    user_id: str
    text: str


@dataclass
class CreateMemoOutput:
    """作成出力DTO"""

    memo: str
    memo_count: int


class CreateMemoUseCase:
    """
    メモ作成 ユースケース

    Bag を読み込み、メモを追記し、保存が完了してから結果を返す。
    """

    def __init__(self, attributes_repository: IAttributesRepository):
        self._attributes_repo = attributes_repository

    async def execute(self, input_data: CreateMemoInput) -> CreateMemoOutput:
        """ユースケースを実行"""
        log = logger.bind(user_id=input_data.user_id)
        log.info("create_memo_started")

        bag = await self._attributes_repo.load(input_data.user_id)
        updated, outcome = state_machine.create(bag, input_data.text)
        await self._attributes_repo.save(input_data.user_id, updated)

        memo_count = state_machine.count(updated)
        log.info("memo_created", outcome=outcome.value, memo_count=memo_count)

        return CreateMemoOutput(memo=input_data.text, memo_count=memo_count)
