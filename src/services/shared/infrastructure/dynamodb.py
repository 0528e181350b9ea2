from decimal import Decimal
from typing import Any

from botocore.exceptions import ClientError

from services.shared.domain.exception import StoreException


def scan_all(table: Any, **kwargs: Any) -> list[dict]:
    """Scan をページングしながら全件取得する"""
    items: list[dict] = []
    try:
        while True:
            response = table.scan(**kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return items
            kwargs["ExclusiveStartKey"] = last_key
    except ClientError as e:
        raise StoreException(f"Could not scan table {table.name}: {e}") from e


def to_int(value: Decimal | int | None, default: int = 0) -> int:
    """DynamoDB の数値（Decimal）を int に変換する"""
    if value is None:
        return default
    return int(value)


def is_conditional_check_failure(error: ClientError) -> bool:
    return error.response["Error"]["Code"] == "ConditionalCheckFailedException"
