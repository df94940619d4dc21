"""Memo Domain Module"""
from . import state_machine
from .entities.attribute_bag import MEMOS_KEY, AttributeBag
from .value_objects.memo_listing import MemoListing, MemoOutcome, NoMemos

__all__ = [
    "state_machine",
    "MEMOS_KEY",
    "AttributeBag",
    "MemoListing",
    "MemoOutcome",
    "NoMemos",
]
