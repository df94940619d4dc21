"""Application Ports (Interfaces)"""
from .repositories import IAttributesRepository

__all__ = [
    "IAttributesRepository",
]
