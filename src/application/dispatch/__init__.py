"""Intent Dispatch"""
from .dispatcher import SkillDispatcher
from .handlers import (
    CatchAllErrorHandler,
    ErrorHandler,
    HandlerInput,
    IntentHandler,
    LaunchHandler,
    RequestHandler,
    SessionEndedHandler,
)
from .response_builder import ResponseBuilder

__all__ = [
    "SkillDispatcher",
    "CatchAllErrorHandler",
    "ErrorHandler",
    "HandlerInput",
    "IntentHandler",
    "LaunchHandler",
    "RequestHandler",
    "SessionEndedHandler",
    "ResponseBuilder",
]
