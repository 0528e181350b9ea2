from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from services.booking.domain.enum import RoomType
from services.shared.domain.exception import ValidationException


@dataclass(frozen=True)
class RoomCounts:
    """部屋タイプ別の室数"""

    single: int = 0
    double: int = 0
    suite: int = 0

    def __post_init__(self) -> None:
        for room_type, count in self.items():
            if count < 0:
                raise ValidationException(
                    f"Number of {room_type.value} rooms cannot be negative"
                )

    def of(self, room_type: RoomType) -> int:
        """指定タイプの室数を返す"""
        return {
            RoomType.SINGLE: self.single,
            RoomType.DOUBLE: self.double,
            RoomType.SUITE: self.suite,
        }[room_type]

    def items(self) -> Iterator[tuple[RoomType, int]]:
        for room_type in RoomType:
            yield room_type, self.of(room_type)

    @property
    def total(self) -> int:
        return self.single + self.double + self.suite

    def total_beds(self, bed_capacity: Mapping[RoomType, int]) -> int:
        """ベッド数の合計"""
        return sum(count * bed_capacity[room_type] for room_type, count in self.items())

    def validate_occupancy(self, guests: int, bed_capacity: Mapping[RoomType, int]) -> None:
        """宿泊人数と室数・ベッド数の整合性を検証する

        - 1部屋以上、1名以上の予約であること
        - 宿泊人数はベッド数を超えない
        - 宿泊人数は室数を下回らない（空室の予約は不可）
        """
        if guests < 1:
            raise ValidationException("At least one guest is required")
        if self.total < 1:
            raise ValidationException("At least one room must be booked")
        if guests > self.total_beds(bed_capacity):
            raise ValidationException(
                "Number of guests exceeds the available number of beds"
            )
        if guests < self.total:
            raise ValidationException(
                "Number of guests cannot be less than the number of rooms booked"
            )
