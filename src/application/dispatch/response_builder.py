"""Response Builder"""
from __future__ import annotations

from src.domain.skill.envelope import Intent
from src.domain.skill.response import (
    Card,
    DelegateDirective,
    OutputSpeech,
    Reprompt,
    ResponseBody,
    SkillResponse,
)


class ResponseBuilder:
    """
    SkillResponse を組み立てるビルダー

    ターンごとに新しいインスタンスを使う。
    """

    def __init__(self) -> None:
        self._speech: OutputSpeech | None = None
        self._reprompt: Reprompt | None = None
        self._card: Card | None = None
        self._directives: list[DelegateDirective] = []
        self._should_end_session: bool | None = None

    def speak(self, text: str) -> ResponseBuilder:
        self._speech = OutputSpeech.of(text)
        return self

    def reprompt(self, text: str) -> ResponseBuilder:
        """リプロンプトを設定（続きの発話を待つのでセッションは継続）"""
        self._reprompt = Reprompt(output_speech=OutputSpeech.of(text))
        self._should_end_session = False
        return self

    def simple_card(self, title: str, content: str) -> ResponseBuilder:
        self._card = Card(title=title, content=content)
        return self

    def add_delegate_directive(self, updated_intent: Intent | None = None) -> ResponseBuilder:
        self._directives.append(DelegateDirective(updated_intent=updated_intent))
        return self

    def set_should_end_session(self, should_end_session: bool) -> ResponseBuilder:
        self._should_end_session = should_end_session
        return self

    def build(self) -> SkillResponse:
        return SkillResponse(
            response=ResponseBody(
                output_speech=self._speech,
                card=self._card,
                reprompt=self._reprompt,
                directives=list(self._directives) or None,
                should_end_session=self._should_end_session,
            )
        )
