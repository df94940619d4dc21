"""Shared fixtures"""
from typing import Any, Callable

import pytest

from src.infrastructure.config import Settings
from src.infrastructure.persistence import InMemoryAttributesRepository
from src.presentation.skill import build_skill

USER_ID = "amzn1.ask.account.TEST"


@pytest.fixture
def user_id() -> str:
    return USER_ID


def _envelope(request: dict[str, Any], user_id: str | None = USER_ID) -> dict[str, Any]:
    system: dict[str, Any] = {"application": {"applicationId": "amzn1.ask.skill.TEST"}}
    session: dict[str, Any] = {"sessionId": "amzn1.echo-api.session.TEST", "new": False}
    if user_id is not None:
        system["user"] = {"userId": user_id}
        session["user"] = {"userId": user_id}
    return {
        "version": "1.0",
        "session": session,
        "context": {"System": system},
        "request": {
            "requestId": "amzn1.echo-api.request.TEST",
            "timestamp": "2026-10-17T09:00:00Z",
            "locale": "en-US",
            **request,
        },
    }


@pytest.fixture
def launch_event() -> Callable[..., dict[str, Any]]:
    def factory(user_id: str | None = USER_ID) -> dict[str, Any]:
        return _envelope({"type": "LaunchRequest"}, user_id=user_id)

    return factory


@pytest.fixture
def intent_event() -> Callable[..., dict[str, Any]]:
    def factory(
        name: str,
        slots: dict[str, str | None] | None = None,
        dialog_state: str | None = None,
        user_id: str | None = USER_ID,
    ) -> dict[str, Any]:
        intent: dict[str, Any] = {"name": name, "confirmationStatus": "NONE"}
        if slots is not None:
            intent["slots"] = {
                slot_name: {
                    "name": slot_name,
                    "confirmationStatus": "NONE",
                    **({"value": value} if value is not None else {}),
                }
                for slot_name, value in slots.items()
            }
        request: dict[str, Any] = {"type": "IntentRequest", "intent": intent}
        if dialog_state is not None:
            request["dialogState"] = dialog_state
        return _envelope(request, user_id=user_id)

    return factory


@pytest.fixture
def session_ended_event() -> Callable[..., dict[str, Any]]:
    def factory(reason: str = "USER_INITIATED") -> dict[str, Any]:
        return _envelope({"type": "SessionEndedRequest", "reason": reason})

    return factory


@pytest.fixture
def settings() -> Settings:
    return Settings(persistence_backend="memory", card_title="Memo")


@pytest.fixture
def repository() -> InMemoryAttributesRepository:
    return InMemoryAttributesRepository()


@pytest.fixture
def skill(settings: Settings, repository: InMemoryAttributesRepository):
    return build_skill(settings, attributes_repository=repository)
