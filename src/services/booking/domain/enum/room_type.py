from enum import Enum


class RoomType(str, Enum):
    """部屋タイプ

    API・在庫テーブルで使う表記（先頭大文字）をそのまま値として持つ。
    """

    SINGLE = "Single"
    DOUBLE = "Double"
    SUITE = "Suite"
