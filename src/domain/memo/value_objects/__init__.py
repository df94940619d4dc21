"""Memo Value Objects"""
from .memo_listing import MemoListing, MemoOutcome, NoMemos

__all__ = ["MemoListing", "MemoOutcome", "NoMemos"]
