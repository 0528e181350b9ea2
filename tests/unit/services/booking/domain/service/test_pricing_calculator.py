from datetime import date

import pytest

from services.booking.domain.service.pricing_calculator import (
    PricingCalculator,
    compute_nights,
)
from services.booking.domain.value_object import RoomCounts
from services.booking.domain.value_object.booking_policy import DEFAULT_NIGHTLY_RATES
from services.shared.domain.exception import InvalidDateRangeException


class TestComputeNights:
    def test_two_nights(self):
        assert compute_nights(date(2030, 1, 10), date(2030, 1, 12)) == 2

    def test_zero_nights(self):
        with pytest.raises(InvalidDateRangeException):
            compute_nights(date(2030, 1, 10), date(2030, 1, 10))


class TestPricingCalculator:
    @pytest.fixture
    def calculator(self):
        return PricingCalculator(DEFAULT_NIGHTLY_RATES)

    def test_one_double_two_nights(self, calculator):
        assert calculator.compute_total_price(RoomCounts(double=1), 2) == 2000

    def test_mixed_rooms(self, calculator):
        counts = RoomCounts(single=2, double=1, suite=1)
        assert calculator.compute_total_price(counts, 3) == 3 * (1000 + 1000 + 1500)

    def test_non_positive_nights(self, calculator):
        with pytest.raises(InvalidDateRangeException):
            calculator.compute_total_price(RoomCounts(single=1), 0)
