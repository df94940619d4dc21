"""Memo Listing Value Objects"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MemoOutcome(str, Enum):
    """状態遷移の結果"""

    CREATED = "created"
    DELETED = "deleted"


@dataclass(frozen=True)
class NoMemos:
    """メモが1件も無いことを表す一覧結果"""

    pass


@dataclass(frozen=True)
class MemoListing:
    """
    メモ一覧（値オブジェクト）

    空の一覧は NoMemos で表すため、ここでは1件以上を保証する。
    """

    memos: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.memos:
            raise ValueError("MemoListing requires at least one memo; use NoMemos")

    @property
    def count(self) -> int:
        return len(self.memos)

    @property
    def is_plural(self) -> bool:
        return self.count > 1
