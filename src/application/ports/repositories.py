"""Repository Interfaces (Ports)"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.memo.entities import AttributeBag


class IAttributesRepository(ABC):
    """
    Attributes Repository Interface

    ユーザーIDをキーに Attribute Bag を読み書きする抽象インターフェース。
    具体的な実装（DynamoDB等）はインフラ層で提供する。
    失敗時は PersistenceFailure を送出し、内部でリトライはしない。
    """

    @abstractmethod
    async def load(self, user_id: str) -> AttributeBag:
        """Bag を取得（未保存なら空の Bag）"""
        pass

    @abstractmethod
    async def save(self, user_id: str, bag: AttributeBag) -> None:
        """Bag を保存"""
        pass
