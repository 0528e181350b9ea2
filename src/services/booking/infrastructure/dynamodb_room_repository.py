import os

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from services.booking.domain.entity import Room
from services.booking.domain.enum import RoomType
from services.booking.domain.repository import RoomRepository
from services.shared.domain.exception import (
    InventoryUpdateFailedException,
    StoreException,
)
from services.shared.infrastructure import is_conditional_check_failure, scan_all


class DynamoDBRoomRepository(RoomRepository):
    """DynamoDBを使用したRoomRepository の具象実装

    在庫テーブルのパーティションキーは roomId。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("INVENTORY_TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def find_by_id(self, room_id: str) -> Room | None:
        """部屋IDで検索（強い整合性）"""
        try:
            response = self.table.get_item(Key={"roomId": room_id}, ConsistentRead=True)
        except ClientError as e:
            raise StoreException(f"Could not read room {room_id}: {e}") from e
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_available(self) -> list[Room]:
        """空室をすべて取得する（強い整合性）"""
        items = scan_all(
            self.table,
            FilterExpression=Attr("roomIsAvailable").eq(True),
            ConsistentRead=True,
        )
        return [self._to_entity(item) for item in items]

    def set_availability(self, room_id: str, available: bool) -> None:
        """部屋の空き状況を更新する

        在庫に存在しない部屋は作成しない。
        使用中にする場合は、その時点で空室であることを条件にする。
        """
        condition = Attr("roomId").exists()
        if not available:
            condition = condition & Attr("roomIsAvailable").eq(True)

        try:
            # 並列に呼ばれるため、スレッドセーフなクライアントを使う
            self.table.meta.client.update_item(
                TableName=self.table_name,
                Key={"roomId": room_id},
                UpdateExpression="SET roomIsAvailable = :available",
                ExpressionAttributeValues={":available": available},
                ConditionExpression=condition,
            )
        except ClientError as e:
            if is_conditional_check_failure(e):
                reason = "room does not exist" if available else "room is not available"
                raise InventoryUpdateFailedException(room_id, reason) from e
            raise InventoryUpdateFailedException(room_id, str(e)) from e

    def _to_entity(self, item: dict) -> Room:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Room(
            id=item["roomId"],
            room_type=RoomType(item["roomType"]),
            is_available=bool(item.get("roomIsAvailable", False)),
        )
