import pytest

from services.booking.domain.enum import RoomType
from services.booking.domain.value_object import BookingPolicy


class TestBookingPolicy:
    def test_defaults(self):
        policy = BookingPolicy()
        assert policy.nightly_rates[RoomType.DOUBLE] == 1000
        assert policy.bed_capacity[RoomType.SUITE] == 2
        assert policy.cancellation_window_days == 2

    def test_missing_room_type(self):
        with pytest.raises(ValueError, match="missing room types: Suite"):
            BookingPolicy(nightly_rates={RoomType.SINGLE: 500, RoomType.DOUBLE: 1000})

    def test_non_positive_rate(self):
        with pytest.raises(ValueError):
            BookingPolicy(
                nightly_rates={RoomType.SINGLE: 0, RoomType.DOUBLE: 1000, RoomType.SUITE: 1500}
            )

    def test_negative_window(self):
        with pytest.raises(ValueError):
            BookingPolicy(cancellation_window_days=-1)

    def test_tables_are_read_only(self):
        rates = {RoomType.SINGLE: 1, RoomType.DOUBLE: 2, RoomType.SUITE: 3}
        policy = BookingPolicy(nightly_rates=rates)
        rates[RoomType.SINGLE] = 100
        assert policy.nightly_rates[RoomType.SINGLE] == 1
        with pytest.raises(TypeError):
            policy.nightly_rates[RoomType.SINGLE] = 100
