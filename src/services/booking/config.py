import os
from collections.abc import Mapping

from pydantic import NonNegativeInt, PositiveInt, TypeAdapter

from services.booking.domain.enum import RoomType
from services.booking.domain.value_object.booking_policy import (
    DEFAULT_BED_CAPACITY,
    DEFAULT_CANCELLATION_WINDOW_DAYS,
    DEFAULT_NIGHTLY_RATES,
    BookingPolicy,
)

DEFAULT_INVENTORY_MAX_WORKERS = 8

_POLICY_TABLE = TypeAdapter(dict[RoomType, PositiveInt])
_NON_NEGATIVE_INT = TypeAdapter(NonNegativeInt)


def _read_table(
    environ: Mapping[str, str], key: str, default: Mapping[RoomType, int]
) -> Mapping[RoomType, int]:
    raw = environ.get(key)
    if not raw:
        return default
    return _POLICY_TABLE.validate_json(raw)


def _read_int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if not raw:
        return default
    return _NON_NEGATIVE_INT.validate_python(raw)


def load_policy(environ: Mapping[str, str] | None = None) -> BookingPolicy:
    """環境変数から料金・定員・キャンセル期限のポリシーを読み込む

    NIGHTLY_RATES / BED_CAPACITY は {"Single": 500, ...} 形式の JSON。
    未設定の項目は既定値を使う。
    """
    environ = os.environ if environ is None else environ
    return BookingPolicy(
        nightly_rates=_read_table(environ, "NIGHTLY_RATES", DEFAULT_NIGHTLY_RATES),
        bed_capacity=_read_table(environ, "BED_CAPACITY", DEFAULT_BED_CAPACITY),
        cancellation_window_days=_read_int(
            environ, "CANCELLATION_WINDOW_DAYS", DEFAULT_CANCELLATION_WINDOW_DAYS
        ),
    )


def inventory_max_workers(environ: Mapping[str, str] | None = None) -> int:
    """在庫更新を並列実行するスレッド数"""
    environ = os.environ if environ is None else environ
    workers = _read_int(environ, "INVENTORY_MAX_WORKERS", DEFAULT_INVENTORY_MAX_WORKERS)
    if workers < 1:
        raise ValueError("INVENTORY_MAX_WORKERS must be at least 1")
    return workers
