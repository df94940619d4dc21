"""Intent Dispatcher"""
from __future__ import annotations

from typing import Any, Sequence

import structlog

from src.domain.skill.envelope import RequestEnvelope
from src.domain.skill.errors import DispatchMiss, MalformedRequest
from src.domain.skill.response import SkillResponse

from .handlers import ErrorHandler, HandlerInput, RequestHandler
from .response_builder import ResponseBuilder

logger = structlog.get_logger()


class SkillDispatcher:
    """
    述語ディスパッチャ

    登録順にハンドラの `matches` を評価し、最初にマッチしたものを呼ぶ。
    マッチしない場合は DispatchMiss を送出し、他のエラーと同様に
    エラーハンドラへ渡す。テーブルは生成後に変更できない。
    """

    def __init__(
        self,
        request_handlers: Sequence[RequestHandler],
        error_handlers: Sequence[ErrorHandler] = (),
    ):
        self._request_handlers: tuple[RequestHandler, ...] = tuple(request_handlers)
        self._error_handlers: tuple[ErrorHandler, ...] = tuple(error_handlers)

    @property
    def request_handlers(self) -> tuple[RequestHandler, ...]:
        return self._request_handlers

    @property
    def error_handlers(self) -> tuple[ErrorHandler, ...]:
        return self._error_handlers

    def select(self, envelope: RequestEnvelope) -> RequestHandler:
        """最初にマッチしたハンドラを返す"""
        for handler in self._request_handlers:
            if handler.matches(envelope):
                return handler
        raise DispatchMiss(envelope.request_type, envelope.intent_name)

    async def dispatch(self, envelope: RequestEnvelope) -> SkillResponse:
        """エンベロープを1つのハンドラで処理（エラーはそのまま送出）"""
        handler = self.select(envelope)
        logger.info("handler_selected", handler=type(handler).__name__)
        return await handler.handle(HandlerInput(envelope, ResponseBuilder()))

    async def invoke(self, event: dict[str, Any]) -> dict[str, Any]:
        """
        1ターン分の JSON エンベロープを処理

        Args:
            event: プラットフォームから届いたリクエストエンベロープ

        Returns:
            レスポンスエンベロープ
        """
        try:
            envelope = RequestEnvelope.from_event(event)
        except MalformedRequest as e:
            response = await self._handle_error(None, e)
            return response.to_dict()

        with structlog.contextvars.bound_contextvars(
            request_id=envelope.request.request_id,
            request_type=envelope.request_type,
        ):
            try:
                logger.info("request_received", intent=envelope.intent_name)
                response = await self.dispatch(envelope)
            except Exception as e:
                response = await self._handle_error(envelope, e)

        return response.to_dict()

    async def _handle_error(
        self,
        envelope: RequestEnvelope | None,
        error: Exception,
    ) -> SkillResponse:
        """エラーハンドラに渡す（マッチしなければ送出）"""
        error_handler = self._select_error_handler(envelope, error)
        if error_handler is None:
            raise error
        return await error_handler.handle(HandlerInput(envelope, ResponseBuilder()), error)

    def _select_error_handler(
        self,
        envelope: RequestEnvelope | None,
        error: Exception,
    ) -> ErrorHandler | None:
        for handler in self._error_handlers:
            if handler.matches(envelope, error):
                return handler
        return None
