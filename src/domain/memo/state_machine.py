"""
Memo State Machine

Attribute Bag に対する純粋な変換。
入力の Bag は変更せず、常に新しい Bag を返す。
"""
from __future__ import annotations

from .entities.attribute_bag import AttributeBag
from .value_objects.memo_listing import MemoListing, MemoOutcome, NoMemos


def create(bag: AttributeBag, text: str) -> tuple[AttributeBag, MemoOutcome]:
    """メモを末尾に追加"""
    return bag.with_memos((*bag.memos, text)), MemoOutcome.CREATED


def list_memos(bag: AttributeBag) -> MemoListing | NoMemos:
    """作成順のメモ一覧を返す（空なら NoMemos）"""
    memos = bag.memos
    if not memos:
        return NoMemos()
    return MemoListing(memos=memos)


def delete_all(bag: AttributeBag) -> AttributeBag:
    """すべてのメモを削除"""
    return bag.with_memos(())


def count(bag: AttributeBag) -> int:
    return len(bag.memos)
