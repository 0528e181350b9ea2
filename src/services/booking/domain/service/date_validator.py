import re
from datetime import date

from services.shared.domain.exception import InvalidDateRangeException

_DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def is_valid_calendar_date(value: object) -> bool:
    """YYYY-MM-DD 形式かつ実在する日付かどうかを判定する

    数字は ASCII の 0-9 のみ受け付け、末尾の改行も許さない。
    2024-02-30 のように形式は正しくても存在しない日付は False。
    例外は送出しない。
    """
    if not isinstance(value, str):
        return False
    match = _DATE_PATTERN.fullmatch(value)
    if match is None:
        return False
    year, month, day = (int(part) for part in match.groups())
    try:
        parsed = date(year, month, day)
    except ValueError:
        return False
    return (parsed.year, parsed.month, parsed.day) == (year, month, day)


def validate_stay_interval(check_in: date, check_out: date, today: date) -> None:
    """滞在期間の前後関係を検証する

    Raises:
        InvalidDateRangeException: チェックインが today より前、
            またはチェックアウトがチェックインより後でない場合
    """
    if check_in < today:
        raise InvalidDateRangeException(
            f"Check-in date {check_in.isoformat()} is in the past"
        )
    if check_out <= check_in:
        raise InvalidDateRangeException("Check-out date must be after check-in date")
