from dataclasses import dataclass
from datetime import date
from functools import cached_property

from services.booking.domain.service.date_validator import (
    is_valid_calendar_date,
    validate_stay_interval,
)
from services.booking.domain.service.pricing_calculator import compute_nights
from services.shared.domain.exception import (
    InvalidDateRangeException,
    ValidationException,
)


@dataclass(frozen=True)
class StayPeriod:
    """滞在期間(チェックイン日 + チェックアウト日)

    日付は API・テーブルと同じ YYYY-MM-DD 文字列で保持する。
    """

    check_in: str
    check_out: str

    def __post_init__(self) -> None:
        for label, value in (("check-in", self.check_in), ("check-out", self.check_out)):
            if not is_valid_calendar_date(value):
                raise ValidationException(
                    f"Invalid {label} date: {value!r} (expected YYYY-MM-DD)"
                )

        if self.check_out_date <= self.check_in_date:
            raise InvalidDateRangeException("Check-out date must be after check-in date")

    @cached_property
    def check_in_date(self) -> date:
        return date.fromisoformat(self.check_in)

    @cached_property
    def check_out_date(self) -> date:
        return date.fromisoformat(self.check_out)

    def nights(self) -> int:
        """宿泊数を計算する"""
        return compute_nights(self.check_in_date, self.check_out_date)

    def validate_against(self, today: date) -> None:
        """today 基準で予約可能な期間かを検証する"""
        validate_stay_interval(self.check_in_date, self.check_out_date, today)

    def days_until_check_in(self, today: date) -> int:
        """today からチェックインまでの日数"""
        return (self.check_in_date - today).days
