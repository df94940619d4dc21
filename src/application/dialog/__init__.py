"""Dialog Continuation"""
from .continuation_gate import Delegate, Proceed, evaluate

__all__ = ["Delegate", "Proceed", "evaluate"]
