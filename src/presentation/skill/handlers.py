"""
Memo Skill Handlers

各リクエスト/インテントの処理本体。
永続化はユースケース経由で行い、保存完了後に応答を返す。
"""
from __future__ import annotations

import structlog

from src.application.dialog import Delegate, evaluate
from src.application.dispatch import HandlerInput
from src.application.ports.repositories import IAttributesRepository
from src.application.use_cases.memo import (
    CountMemosInput,
    CountMemosUseCase,
    CreateMemoInput,
    CreateMemoUseCase,
    DeleteMemosInput,
    DeleteMemosUseCase,
    ListMemosInput,
    ListMemosUseCase,
)
from src.domain.skill.envelope import IntentRequest, RequestEnvelope, SessionEndedRequest
from src.domain.skill.errors import MalformedRequest
from src.domain.skill.response import SkillResponse

from . import speech

logger = structlog.get_logger()

MEMO_SLOT = "Memo"


def _require_envelope(handler_input: HandlerInput) -> RequestEnvelope:
    if handler_input.envelope is None:
        raise MalformedRequest("Handler invoked without a request envelope")
    return handler_input.envelope


class MemoSkillHandlers:
    """メモスキルのハンドラ群"""

    def __init__(self, attributes_repository: IAttributesRepository, card_title: str = "Memo"):
        self.card_title = card_title
        self._count_memos = CountMemosUseCase(attributes_repository)
        self._create_memo = CreateMemoUseCase(attributes_repository)
        self._delete_memos = DeleteMemosUseCase(attributes_repository)
        self._list_memos = ListMemosUseCase(attributes_repository)

    def _ask(self, handler_input: HandlerInput, text: str) -> SkillResponse:
        """続きの発話を待つ応答"""
        return (
            handler_input.response_builder.speak(text)
            .reprompt(text)
            .simple_card(self.card_title, text)
            .build()
        )

    def _tell(self, handler_input: HandlerInput, text: str) -> SkillResponse:
        """会話を終える応答"""
        return (
            handler_input.response_builder.speak(text)
            .simple_card(self.card_title, text)
            .set_should_end_session(True)
            .build()
        )

    async def launch(self, handler_input: HandlerInput) -> SkillResponse:
        envelope = _require_envelope(handler_input)
        output = await self._count_memos.execute(
            CountMemosInput(user_id=envelope.require_user_id())
        )
        return self._ask(handler_input, speech.welcome(output.memo_count))

    async def create_memo(self, handler_input: HandlerInput) -> SkillResponse:
        envelope = _require_envelope(handler_input)
        request = envelope.request
        if not isinstance(request, IntentRequest):
            raise MalformedRequest(f"Expected IntentRequest, got {request.type}")

        decision = evaluate(request.intent, request.dialog_state, required_slots=(MEMO_SLOT,))
        if isinstance(decision, Delegate):
            logger.info(
                "dialog_delegated",
                dialog_state=request.dialog_state.value if request.dialog_state else None,
            )
            return handler_input.response_builder.add_delegate_directive(decision.intent).build()

        output = await self._create_memo.execute(
            CreateMemoInput(
                user_id=envelope.require_user_id(),
                text=decision.slot_values[MEMO_SLOT],
            )
        )
        return self._tell(handler_input, speech.memo_created(output.memo))

    async def delete_memos(self, handler_input: HandlerInput) -> SkillResponse:
        envelope = _require_envelope(handler_input)
        await self._delete_memos.execute(DeleteMemosInput(user_id=envelope.require_user_id()))
        return self._ask(handler_input, speech.DELETION_COMPLETED_TEXT)

    async def listen_memos(self, handler_input: HandlerInput) -> SkillResponse:
        envelope = _require_envelope(handler_input)
        output = await self._list_memos.execute(
            ListMemosInput(user_id=envelope.require_user_id())
        )
        return self._ask(handler_input, speech.listing(output.listing))

    async def help(self, handler_input: HandlerInput) -> SkillResponse:
        return self._ask(handler_input, speech.HELP_TEXT)

    async def cancel_and_stop(self, handler_input: HandlerInput) -> SkillResponse:
        return self._tell(handler_input, speech.GOODBYE_TEXT)

    async def session_ended(self, handler_input: HandlerInput) -> SkillResponse:
        envelope = _require_envelope(handler_input)
        request = envelope.request
        if isinstance(request, SessionEndedRequest):
            logger.info("session_ended", reason=request.reason, error=request.error)
        return handler_input.response_builder.build()

    async def error(self, handler_input: HandlerInput, error: Exception) -> SkillResponse:
        """エラーをログに残し、定型の謝罪を返す"""
        logger.error(
            "error_handled",
            error_type=type(error).__name__,
            error=str(error),
            exc_info=error,
        )
        return (
            handler_input.response_builder.speak(speech.APOLOGY_TEXT)
            .reprompt(speech.APOLOGY_TEXT)
            .build()
        )
