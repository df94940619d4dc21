"""Skill Domain Module"""
from .envelope import (
    DialogState,
    Intent,
    IntentRequest,
    LaunchRequest,
    Request,
    RequestEnvelope,
    RequestType,
    SessionEndedRequest,
    Slot,
)
from .errors import DispatchMiss, MalformedRequest, PersistenceFailure, SkillError
from .response import Card, DelegateDirective, SkillResponse

__all__ = [
    "DialogState",
    "Intent",
    "IntentRequest",
    "LaunchRequest",
    "Request",
    "RequestEnvelope",
    "RequestType",
    "SessionEndedRequest",
    "Slot",
    "DispatchMiss",
    "MalformedRequest",
    "PersistenceFailure",
    "SkillError",
    "Card",
    "DelegateDirective",
    "SkillResponse",
]
