"""DynamoDB Attributes Repository Implementation"""
from __future__ import annotations

from typing import Any

import boto3
import structlog
from botocore.exceptions import BotoCoreError, ClientError

from src.application.ports.repositories import IAttributesRepository
from src.domain.memo.entities import AttributeBag
from src.domain.skill.errors import PersistenceFailure

logger = structlog.get_logger()


class DynamoDBAttributesRepository(IAttributesRepository):
    """
    DynamoDB ベースの Attributes Repository

    1ユーザー1アイテムの単一テーブル設計:
    - PK: id (ユーザーID)
    - attributes: Attribute Bag (Map)

    boto3 クライアント側のリトライ設定以外に独自のリトライは行わない。
    """

    PARTITION_KEY = "id"
    ATTRIBUTE_NAME = "attributes"

    def __init__(
        self,
        table_name: str = "memo-skill-attributes",
        region: str = "us-east-1",
        create_table: bool = False,
        dynamodb_resource: Any = None,
    ):
        self.table_name = table_name
        self._dynamodb = dynamodb_resource or boto3.resource("dynamodb", region_name=region)
        self._table = self._dynamodb.Table(table_name)
        self._create_table = create_table
        self._table_ready = not create_table

    async def load(self, user_id: str) -> AttributeBag:
        """
        Bag を取得

        アイテムが無い場合は空の Bag を返す（エラーにしない）。
        """
        log = logger.bind(user_id=user_id, table=self.table_name)

        try:
            self._ensure_table()
            response = self._table.get_item(
                Key={self.PARTITION_KEY: user_id},
                ConsistentRead=True,
            )
        except (ClientError, BotoCoreError) as e:
            log.error("attributes_load_failed", error=str(e))
            raise PersistenceFailure("load", user_id, str(e)) from e

        item = response.get("Item")
        if not item:
            log.info("attributes_not_found")
            return AttributeBag.empty()

        try:
            bag = AttributeBag.from_dict(item.get(self.ATTRIBUTE_NAME))
        except ValueError as e:
            log.error("attributes_corrupted", error=str(e))
            raise PersistenceFailure("load", user_id, str(e)) from e

        log.info("attributes_loaded")
        return bag

    async def save(self, user_id: str, bag: AttributeBag) -> None:
        """Bag を保存（put_item の完了を待って戻る）"""
        log = logger.bind(user_id=user_id, table=self.table_name)

        try:
            self._ensure_table()
            self._table.put_item(
                Item={
                    self.PARTITION_KEY: user_id,
                    self.ATTRIBUTE_NAME: bag.to_dict(),
                }
            )
        except (ClientError, BotoCoreError) as e:
            log.error("attributes_save_failed", error=str(e))
            raise PersistenceFailure("save", user_id, str(e)) from e

        log.info("attributes_saved", memo_count=len(bag.memos))

    def _ensure_table(self) -> None:
        """create_table 指定時、初回アクセスでテーブルを作成"""
        if self._table_ready:
            return

        try:
            self._dynamodb.create_table(
                TableName=self.table_name,
                KeySchema=[{"AttributeName": self.PARTITION_KEY, "KeyType": "HASH"}],
                AttributeDefinitions=[
                    {"AttributeName": self.PARTITION_KEY, "AttributeType": "S"}
                ],
                BillingMode="PAY_PER_REQUEST",
            )
            logger.info("table_created", table=self.table_name)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") != "ResourceInUseException":
                raise
            logger.info("table_already_exists", table=self.table_name)

        self._table.wait_until_exists()
        self._table_ready = True
