"""
Request / Error Handlers

ディスパッチテーブルに登録するハンドラの値型。
どの型も `matches` と `handle` の同じ契約を実装する。
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Iterable, Protocol

from src.domain.skill.envelope import RequestEnvelope, RequestType
from src.domain.skill.response import SkillResponse

from .response_builder import ResponseBuilder


@dataclass(frozen=True)
class HandlerInput:
    """
    ハンドラへの入力

    envelope はエンベロープの解析に失敗した場合のみ None になる。
    """

    envelope: RequestEnvelope | None
    response_builder: ResponseBuilder


HandleFn = Callable[[HandlerInput], Awaitable[SkillResponse]]
ErrorHandleFn = Callable[[HandlerInput, Exception], Awaitable[SkillResponse]]


class RequestHandler(Protocol):
    def matches(self, envelope: RequestEnvelope) -> bool: ...

    async def handle(self, handler_input: HandlerInput) -> SkillResponse: ...


class ErrorHandler(Protocol):
    def matches(self, envelope: RequestEnvelope | None, error: Exception) -> bool: ...

    async def handle(self, handler_input: HandlerInput, error: Exception) -> SkillResponse: ...


@dataclass(frozen=True)
class LaunchHandler:
    """LaunchRequest を処理"""

    handle_fn: HandleFn

    def matches(self, envelope: RequestEnvelope) -> bool:
        return envelope.request_type == RequestType.LAUNCH.value

    async def handle(self, handler_input: HandlerInput) -> SkillResponse:
        return await self.handle_fn(handler_input)


@dataclass(frozen=True)
class IntentHandler:
    """
    IntentRequest を処理

    1つのハンドラで複数のインテント名を扱える（例: Cancel と Stop）。
    """

    intent_names: frozenset[str]
    handle_fn: HandleFn

    @classmethod
    def for_intents(cls, intent_names: str | Iterable[str], handle_fn: HandleFn) -> IntentHandler:
        names = [intent_names] if isinstance(intent_names, str) else list(intent_names)
        return cls(intent_names=frozenset(names), handle_fn=handle_fn)

    def matches(self, envelope: RequestEnvelope) -> bool:
        return (
            envelope.request_type == RequestType.INTENT.value
            and envelope.intent_name in self.intent_names
        )

    async def handle(self, handler_input: HandlerInput) -> SkillResponse:
        return await self.handle_fn(handler_input)


@dataclass(frozen=True)
class SessionEndedHandler:
    """SessionEndedRequest を処理"""

    handle_fn: HandleFn

    def matches(self, envelope: RequestEnvelope) -> bool:
        return envelope.request_type == RequestType.SESSION_ENDED.value

    async def handle(self, handler_input: HandlerInput) -> SkillResponse:
        return await self.handle_fn(handler_input)


@dataclass(frozen=True)
class CatchAllErrorHandler:
    """すべてのエラーにマッチする最終フォールバック"""

    handle_fn: ErrorHandleFn

    def matches(self, envelope: RequestEnvelope | None, error: Exception) -> bool:
        return True

    async def handle(self, handler_input: HandlerInput, error: Exception) -> SkillResponse:
        return await self.handle_fn(handler_input, error)
