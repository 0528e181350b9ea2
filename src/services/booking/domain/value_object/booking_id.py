from __future__ import annotations

import uuid
from dataclasses import dataclass

from services.shared.domain.exception import ValidationException


@dataclass(frozen=True)
class BookingId:
    """予約ID（Value Object）

    不変で、値が同じなら同一とみなされる。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValidationException("BookingId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> BookingId:
        """新しい予約IDを採番する（UUID4）"""
        return cls(value=str(uuid.uuid4()))
