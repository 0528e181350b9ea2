from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from services.booking.domain.enum import RoomType

DEFAULT_NIGHTLY_RATES: Mapping[RoomType, int] = MappingProxyType(
    {RoomType.SINGLE: 500, RoomType.DOUBLE: 1000, RoomType.SUITE: 1500}
)
DEFAULT_BED_CAPACITY: Mapping[RoomType, int] = MappingProxyType(
    {RoomType.SINGLE: 1, RoomType.DOUBLE: 2, RoomType.SUITE: 2}
)
DEFAULT_CANCELLATION_WINDOW_DAYS = 2


@dataclass(frozen=True)
class BookingPolicy:
    """料金・定員・キャンセル期限のポリシー

    コードを変えずに調整できるよう、設定値として外から注入する。
    """

    nightly_rates: Mapping[RoomType, int] = field(
        default_factory=lambda: DEFAULT_NIGHTLY_RATES
    )
    bed_capacity: Mapping[RoomType, int] = field(
        default_factory=lambda: DEFAULT_BED_CAPACITY
    )
    cancellation_window_days: int = DEFAULT_CANCELLATION_WINDOW_DAYS

    def __post_init__(self) -> None:
        for name, table in (
            ("nightly_rates", self.nightly_rates),
            ("bed_capacity", self.bed_capacity),
        ):
            missing = [t.value for t in RoomType if t not in table]
            if missing:
                raise ValueError(f"{name} is missing room types: {', '.join(missing)}")
            if any(value <= 0 for value in table.values()):
                raise ValueError(f"{name} values must be positive")
            object.__setattr__(self, name, MappingProxyType(dict(table)))

        if self.cancellation_window_days < 0:
            raise ValueError("cancellation_window_days cannot be negative")
