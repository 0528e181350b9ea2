import math
from collections.abc import Mapping
from datetime import date

from services.booking.domain.enum import RoomType
from services.booking.domain.value_object.room_counts import RoomCounts
from services.shared.domain.exception import InvalidDateRangeException

_SECONDS_PER_DAY = 24 * 60 * 60


def compute_nights(check_in: date, check_out: date) -> int:
    """宿泊数（チェックアウトとの日数差の切り上げ）を計算する"""
    nights = math.ceil((check_out - check_in).total_seconds() / _SECONDS_PER_DAY)
    if nights <= 0:
        raise InvalidDateRangeException("Stay must be at least one night")
    return nights


class PricingCalculator:
    """料金計算

    1泊あたりの料金表はポリシーとして外から注入する。
    """

    def __init__(self, nightly_rates: Mapping[RoomType, int]) -> None:
        self._nightly_rates = dict(nightly_rates)

    def compute_total_price(self, counts: RoomCounts, nights: int) -> int:
        """部屋タイプ別の室数と宿泊数から合計金額を計算する"""
        if nights <= 0:
            raise InvalidDateRangeException("Stay must be at least one night")
        per_night = sum(
            count * self._nightly_rates[room_type] for room_type, count in counts.items()
        )
        return nights * per_night
