"""Attribute Bag Entity"""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Iterable

MEMOS_KEY = "memos"


@dataclass(frozen=True)
class AttributeBag:
    """
    ユーザーごとの永続属性（エンティティ）

    `memos` キーに作成順のメモ一覧を持つ。キーが無い場合は空と同じ扱い。
    `memos` 以外のキーは読み書きを通じてそのまま保持する。
    """

    attributes: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        memos = self.attributes.get(MEMOS_KEY)
        if memos is None:
            return
        if not isinstance(memos, (list, tuple)) or not all(isinstance(m, str) for m in memos):
            raise ValueError(f"'{MEMOS_KEY}' must be a list of strings, got {type(memos).__name__}")

    @property
    def memos(self) -> tuple[str, ...]:
        """作成順のメモ一覧"""
        return tuple(self.attributes.get(MEMOS_KEY) or ())

    def with_memos(self, memos: Iterable[str]) -> AttributeBag:
        """メモ一覧を差し替えた新しい Bag を返す"""
        attributes = copy.deepcopy(self.attributes)
        attributes[MEMOS_KEY] = list(memos)
        return AttributeBag(attributes=attributes)

    def to_dict(self) -> dict[str, Any]:
        """辞書に変換"""
        return copy.deepcopy(self.attributes)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> AttributeBag:
        """辞書から生成"""
        return cls(attributes=copy.deepcopy(data) if data else {})

    @classmethod
    def empty(cls) -> AttributeBag:
        return cls()
