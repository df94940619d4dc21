"""Memo Skill Presentation"""
from .handlers import MemoSkillHandlers
from .skill import build_attributes_repository, build_dispatcher, build_skill

__all__ = [
    "MemoSkillHandlers",
    "build_attributes_repository",
    "build_dispatcher",
    "build_skill",
]
