"""Skill Errors"""
from __future__ import annotations


class SkillError(Exception):
    """スキル処理中のエラー基底クラス"""

    pass


class MalformedRequest(SkillError):
    """リクエストエンベロープに必要なフィールドが欠けているエラー"""

    pass


class DispatchMiss(SkillError):
    """どのハンドラにもマッチしなかったエラー"""

    def __init__(self, request_type: str, intent_name: str | None = None):
        self.request_type = request_type
        self.intent_name = intent_name
        target = f"{request_type}:{intent_name}" if intent_name else request_type
        super().__init__(f"No handler matched request {target}")


class PersistenceFailure(SkillError):
    """属性ストアの読み書きに失敗したエラー"""

    def __init__(self, operation: str, user_id: str, reason: str = ""):
        self.operation = operation
        self.user_id = user_id
        message = f"Failed to {operation} attributes for user {user_id}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
