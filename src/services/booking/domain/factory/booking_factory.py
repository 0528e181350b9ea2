from collections.abc import Callable, Sequence

from services.booking.domain.entity.booking import Booking
from services.booking.domain.value_object import (
    BookingId,
    GuestContact,
    RoomCounts,
    StayPeriod,
)


class BookingFactory:
    """予約エンティティのファクトリ

    - 予約IDの採番
    - 割り当て済みの部屋と料金を含む初期状態の生成
    """

    def __init__(self, id_generator: Callable[[], BookingId] = BookingId.generate) -> None:
        self._id_generator = id_generator

    def create(
        self,
        guest: GuestContact,
        stay_period: StayPeriod,
        guests: int,
        room_counts: RoomCounts,
        room_ids: Sequence[str],
        total_price: int,
    ) -> Booking:
        """新規予約エンティティを生成する"""
        return Booking(
            id=self._id_generator(),
            guest=guest,
            stay_period=stay_period,
            guests=guests,
            room_counts=room_counts,
            room_ids=room_ids,
            total_price=total_price,
        )
