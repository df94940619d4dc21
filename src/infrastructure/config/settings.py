"""Application Settings"""
from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    アプリケーション設定

    12-Factor App の Config 原則に従い、
    すべての設定は環境変数から取得する。
    """

    # Service
    service_name: str = "memo-skill"
    environment: str = "development"
    log_level: str = "INFO"
    debug: bool = False

    # AWS
    aws_region: str = "us-east-1"

    # DynamoDB
    dynamodb_table_memos: str = Field(
        default="memo-skill-attributes",
        validation_alias=AliasChoices("MEMO_DYNAMODB_TABLE_MEMOS", "DYNAMODB_TABLE_MEMOS"),
    )
    create_table: bool = False

    # Persistence backend ("memory" はローカル実行用)
    persistence_backend: Literal["dynamodb", "memory"] = "dynamodb"

    # Skill
    card_title: str = "Memo"

    class Config:
        env_prefix = "MEMO_"
        env_file = ".env"
        case_sensitive = False
        populate_by_name = True

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache()
def get_settings() -> Settings:
    """設定のシングルトンインスタンスを取得"""
    return Settings()
