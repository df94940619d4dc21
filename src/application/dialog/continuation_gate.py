"""
Dialog Continuation Gate

スロットが揃っているかをダイアログ状態から判定する。
COMPLETED 以外はプラットフォームにスロット収集を委譲し、
COMPLETED のときだけ必須スロットの値を取り出して処理を進める。
ゲート自身は状態を持たず、毎ターンのリクエストに含まれる状態だけを見る。
"""
from __future__ import annotations

from dataclasses import dataclass, field

from src.domain.skill.envelope import DialogState, Intent
from src.domain.skill.errors import MalformedRequest


@dataclass(frozen=True)
class Delegate:
    """スロット収集を継続する"""

    intent: Intent


@dataclass(frozen=True)
class Proceed:
    """必須スロットが揃っている"""

    slot_values: dict[str, str] = field(default_factory=dict)


def evaluate(
    intent: Intent,
    dialog_state: DialogState | None,
    required_slots: tuple[str, ...],
) -> Delegate | Proceed:
    """ダイアログ状態と必須スロットから次の動作を決める"""
    if dialog_state is not DialogState.COMPLETED:
        return Delegate(intent=intent)

    values: dict[str, str] = {}
    for slot_name in required_slots:
        value = intent.slot_value(slot_name)
        if value is None or value == "":
            raise MalformedRequest(
                f"Slot {slot_name} of {intent.name} is empty although dialog is COMPLETED"
            )
        values[slot_name] = value

    return Proceed(slot_values=values)
