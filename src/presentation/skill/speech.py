"""Speech Texts"""
from __future__ import annotations

from src.domain.memo import MemoListing, NoMemos

HELP_TEXT = "You can save memo and re listen to it"
GOODBYE_TEXT = "Goodbye!"
DELETION_COMPLETED_TEXT = "Deletion completed"
NO_MEMOS_TEXT = "You have no messages to listen to."
APOLOGY_TEXT = "Sorry, I can't understand the command. Please say again."


def welcome(memo_count: int) -> str:
    """起動時の挨拶（1件のときだけ単数形）"""
    amount = "no" if memo_count == 0 else str(memo_count)
    suffix = "" if memo_count == 1 else "s"
    return f"Welcome to the Memo Skill, you have {amount} message{suffix}!"


def memo_created(memo: str) -> str:
    return f"Memo created: {memo}"


def listing(result: MemoListing | NoMemos) -> str:
    """一覧の読み上げ（2件以上で複数形）"""
    if isinstance(result, NoMemos):
        return NO_MEMOS_TEXT
    suffix = "s" if result.is_plural else ""
    return f"Here is your message{suffix}: " + ", ".join(result.memos)
