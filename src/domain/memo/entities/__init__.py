"""Memo Entities"""
from .attribute_bag import AttributeBag

__all__ = ["AttributeBag"]
