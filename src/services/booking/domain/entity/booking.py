from collections.abc import Sequence
from datetime import date

from services.booking.domain.value_object import (
    BookingId,
    GuestContact,
    RoomCounts,
    StayPeriod,
)
from services.shared.domain import Entity
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    CancellationWindowExpiredException,
)


class Booking(Entity[BookingId]):
    """宿泊予約エンティティ

    BookingId で同一性を判定する。
    割り当て済みの部屋数は常に要求室数と一致していなければならない。
    """

    def __init__(
        self,
        id: BookingId,
        guest: GuestContact,
        stay_period: StayPeriod,
        guests: int,
        room_counts: RoomCounts,
        room_ids: Sequence[str],
        total_price: int,
    ) -> None:
        super().__init__(id)
        self._guest = guest
        self._stay_period = stay_period
        self._guests = guests
        self._room_counts = room_counts
        self._room_ids = tuple(room_ids)
        self._total_price = total_price

        # ドメイン不変条件の検証
        self._validate_room_assignment()

    def _validate_room_assignment(self) -> None:
        """割り当て済みの部屋が要求室数と一致し、重複していないこと"""
        if len(self._room_ids) != self._room_counts.total:
            raise BusinessRuleViolationException(
                f"Booking {self.id} has {len(self._room_ids)} rooms assigned "
                f"but requests {self._room_counts.total}"
            )
        if len(set(self._room_ids)) != len(self._room_ids):
            raise BusinessRuleViolationException(
                f"Booking {self.id} has duplicate room assignments"
            )

    @property
    def guest(self) -> GuestContact:
        return self._guest

    @property
    def stay_period(self) -> StayPeriod:
        return self._stay_period

    @property
    def guests(self) -> int:
        return self._guests

    @property
    def room_counts(self) -> RoomCounts:
        return self._room_counts

    @property
    def room_ids(self) -> tuple[str, ...]:
        return self._room_ids

    @property
    def total_price(self) -> int:
        return self._total_price

    def reschedule(
        self,
        stay_period: StayPeriod,
        guests: int,
        room_counts: RoomCounts,
        room_ids: Sequence[str],
        total_price: int,
    ) -> None:
        """日程・人数・部屋構成を変更する"""
        previous = (
            self._stay_period,
            self._guests,
            self._room_counts,
            self._room_ids,
            self._total_price,
        )
        self._stay_period = stay_period
        self._guests = guests
        self._room_counts = room_counts
        self._room_ids = tuple(room_ids)
        self._total_price = total_price
        try:
            self._validate_room_assignment()
        except BusinessRuleViolationException:
            (
                self._stay_period,
                self._guests,
                self._room_counts,
                self._room_ids,
                self._total_price,
            ) = previous
            raise

    def ensure_cancellable(self, today: date, window_days: int) -> None:
        """キャンセル可能期限内であることを確認する

        チェックインまでの日数が window_days 以下ならキャンセル不可。
        """
        days_left = self._stay_period.days_until_check_in(today)
        if days_left <= window_days:
            raise CancellationWindowExpiredException(
                f"Bookings can only be cancelled more than {window_days} days "
                f"before check-in ({days_left} days left)"
            )
