"""Count Memos Use Case"""
from __future__ import annotations

from dataclasses import dataclass

from src.application.ports.repositories import IAttributesRepository
from src.domain.memo import state_machine


@dataclass
class CountMemosInput:
    user_id: str


@dataclass
class CountMemosOutput:
    memo_count: int


class CountMemosUseCase:
    """起動時の挨拶用にメモ件数を返す"""

    def __init__(self, attributes_repository: IAttributesRepository):
        self._attributes_repo = attributes_repository

    async def execute(self, input_data: CountMemosInput) -> CountMemosOutput:
        bag = await self._attributes_repo.load(input_data.user_id)
        return CountMemosOutput(memo_count=state_machine.count(bag))
