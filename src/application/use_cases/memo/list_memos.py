"""List Memos Use Case"""
from __future__ import annotations

from dataclasses import dataclass

import structlog

from src.application.ports.repositories import IAttributesRepository
from src.domain.memo import MemoListing, NoMemos, state_machine

logger = structlog.get_logger()


@dataclass
class ListMemosInput:
    """一覧入力DTO"""

    user_id: str


@dataclass
class ListMemosOutput:
    """一覧出力DTO"""

    listing: MemoListing | NoMemos


class ListMemosUseCase:
    """メモ一覧 ユースケース（読み取りのみ）"""

    def __init__(self, attributes_repository: IAttributesRepository):
        self._attributes_repo = attributes_repository

    async def execute(self, input_data: ListMemosInput) -> ListMemosOutput:
        log = logger.bind(user_id=input_data.user_id)

        bag = await self._attributes_repo.load(input_data.user_id)
        listing = state_machine.list_memos(bag)

        log.info(
            "memos_listed",
            memo_count=listing.count if isinstance(listing, MemoListing) else 0,
        )
        return ListMemosOutput(listing=listing)
