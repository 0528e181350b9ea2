from datetime import date

import pytest

from services.booking.domain.service.date_validator import (
    is_valid_calendar_date,
    validate_stay_interval,
)
from services.shared.domain.exception import InvalidDateRangeException


class TestIsValidCalendarDate:
    @pytest.mark.parametrize("value", ["2030-01-10", "2028-02-29", "2030-12-31"])
    def test_valid_dates(self, value):
        assert is_valid_calendar_date(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            "2030-02-30",
            "2029-02-29",
            "2030-13-01",
            "2030-1-10",
            "20300110",
            "2030-01-10\n",
            "\u0662\u0660\u0663\u0660-\u0660\u0661-\u0661\u0660",
            "",
            None,
            20300110,
        ],
    )
    def test_invalid_dates(self, value):
        assert is_valid_calendar_date(value) is False


class TestValidateStayInterval:
    def test_valid_interval(self):
        validate_stay_interval(date(2030, 1, 10), date(2030, 1, 12), date(2030, 1, 1))

    def test_past_check_in(self):
        with pytest.raises(InvalidDateRangeException):
            validate_stay_interval(date(2029, 12, 31), date(2030, 1, 2), date(2030, 1, 1))

    def test_check_out_not_after_check_in(self):
        with pytest.raises(InvalidDateRangeException):
            validate_stay_interval(date(2030, 1, 10), date(2030, 1, 10), date(2030, 1, 1))
