from datetime import date

from services.booking.domain.value_object import BookingPolicy, RoomCounts, StayPeriod


def validate_reservation(
    stay_period: StayPeriod,
    guests: int,
    room_counts: RoomCounts,
    policy: BookingPolicy,
    today: date,
) -> None:
    """在庫の割り当て前に予約内容の不変条件を検証する"""
    stay_period.validate_against(today)
    room_counts.validate_occupancy(guests, policy.bed_capacity)
