"""Skill Response"""
from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from .envelope import Intent, SkillModel


class OutputSpeech(SkillModel):
    """SSML の発話"""

    type: Literal["SSML"] = "SSML"
    ssml: str

    @classmethod
    def of(cls, text: str) -> OutputSpeech:
        return cls(ssml=f"<speak>{text}</speak>")


class Card(SkillModel):
    """シンプルカード"""

    type: Literal["Simple"] = "Simple"
    title: str
    content: str


class Reprompt(SkillModel):
    output_speech: OutputSpeech = Field(alias="outputSpeech")


class DelegateDirective(SkillModel):
    """スロット収集をプラットフォームに委譲するディレクティブ"""

    type: Literal["Dialog.Delegate"] = "Dialog.Delegate"
    updated_intent: Intent | None = Field(default=None, alias="updatedIntent")


class ResponseBody(SkillModel):
    output_speech: OutputSpeech | None = Field(default=None, alias="outputSpeech")
    card: Card | None = None
    reprompt: Reprompt | None = None
    directives: list[DelegateDirective] | None = None
    should_end_session: bool | None = Field(default=None, alias="shouldEndSession")


class SkillResponse(SkillModel):
    """
    1ターン分の応答

    プラットフォームのレスポンスエンベロープそのものの形で保持する。
    """

    version: str = "1.0"
    session_attributes: dict[str, Any] = Field(default_factory=dict, alias="sessionAttributes")
    response: ResponseBody = Field(default_factory=ResponseBody)

    @property
    def is_empty(self) -> bool:
        body = self.response
        return (
            body.output_speech is None
            and body.reprompt is None
            and body.card is None
            and not body.directives
        )

    def to_dict(self) -> dict[str, Any]:
        """レスポンスエンベロープに変換"""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
