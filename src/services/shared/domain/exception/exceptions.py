from __future__ import annotations

from dataclasses import dataclass


class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ValidationException(DomainException):
    """入力値・不変条件の検証に失敗した場合"""

    pass


class InvalidDateRangeException(ValidationException):
    """日付の範囲が不正な場合（過去のチェックイン、チェックアウトが前後逆など）"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


@dataclass(frozen=True)
class InventoryShortage:
    """部屋タイプ単位の在庫不足"""

    room_type: str
    requested: int
    available: int

    def __str__(self) -> str:
        return f"{self.room_type} (requested {self.requested}, available {self.available})"


class InsufficientInventoryException(BusinessRuleViolationException):
    """要求された部屋数を在庫で満たせない場合

    不足している部屋タイプをすべて shortages に保持する。
    """

    def __init__(self, shortages: list[InventoryShortage]) -> None:
        self.shortages = tuple(shortages)
        summary = ", ".join(str(s) for s in self.shortages)
        super().__init__(f"Not enough available rooms: {summary}")


class CancellationWindowExpiredException(BusinessRuleViolationException):
    """キャンセル可能期限を過ぎている場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass


class StoreException(DomainException):
    """データストアへの読み書きに失敗した場合"""

    pass


class InventoryUpdateFailedException(StoreException):
    """部屋の空き状況の更新に失敗した場合"""

    def __init__(self, room_id: str, reason: str | None = None) -> None:
        self.room_id = room_id
        message = f"Could not update availability of room {room_id}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
