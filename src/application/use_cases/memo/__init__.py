"""Memo Use Cases"""
from .count_memos import CountMemosInput, CountMemosOutput, CountMemosUseCase
from .create_memo import CreateMemoInput, CreateMemoOutput, CreateMemoUseCase
from .delete_memos import DeleteMemosInput, DeleteMemosOutput, DeleteMemosUseCase
from .list_memos import ListMemosInput, ListMemosOutput, ListMemosUseCase

__all__ = [
    "CountMemosInput",
    "CountMemosOutput",
    "CountMemosUseCase",
    "CreateMemoInput",
    "CreateMemoOutput",
    "CreateMemoUseCase",
    "DeleteMemosInput",
    "DeleteMemosOutput",
    "DeleteMemosUseCase",
    "ListMemosInput",
    "ListMemosOutput",
    "ListMemosUseCase",
]
