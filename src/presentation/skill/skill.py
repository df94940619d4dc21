"""Skill Builder"""
from __future__ import annotations

from src.application.dispatch import (
    CatchAllErrorHandler,
    IntentHandler,
    LaunchHandler,
    SessionEndedHandler,
    SkillDispatcher,
)
from src.application.ports.repositories import IAttributesRepository
from src.infrastructure.config import Settings
from src.infrastructure.persistence import (
    DynamoDBAttributesRepository,
    InMemoryAttributesRepository,
)

from .handlers import MemoSkillHandlers


def build_dispatcher(handlers: MemoSkillHandlers) -> SkillDispatcher:
    """ディスパッチテーブルを構築（登録順に評価される）"""
    return SkillDispatcher(
        request_handlers=[
            LaunchHandler(handlers.launch),
            IntentHandler.for_intents("CreateMemoIntent", handlers.create_memo),
            IntentHandler.for_intents("DeleteMemoIntent", handlers.delete_memos),
            IntentHandler.for_intents("ListenMemoIntent", handlers.listen_memos),
            IntentHandler.for_intents("AMAZON.HelpIntent", handlers.help),
            IntentHandler.for_intents(
                ["AMAZON.CancelIntent", "AMAZON.StopIntent"], handlers.cancel_and_stop
            ),
            SessionEndedHandler(handlers.session_ended),
        ],
        error_handlers=[CatchAllErrorHandler(handlers.error)],
    )


def build_attributes_repository(settings: Settings) -> IAttributesRepository:
    """設定に応じた永続化バックエンドを生成"""
    if settings.persistence_backend == "memory":
        return InMemoryAttributesRepository()
    return DynamoDBAttributesRepository(
        table_name=settings.dynamodb_table_memos,
        region=settings.aws_region,
        create_table=settings.create_table,
    )


def build_skill(
    settings: Settings,
    attributes_repository: IAttributesRepository | None = None,
) -> SkillDispatcher:
    """
    スキルを構築

    プロセス起動時に一度だけ呼び、返したディスパッチャを各リクエストで共有する。
    """
    repository = attributes_repository or build_attributes_repository(settings)
    handlers = MemoSkillHandlers(repository, card_title=settings.card_title)
    return build_dispatcher(handlers)
