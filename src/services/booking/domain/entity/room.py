from services.booking.domain.enum import RoomType
from services.shared.domain import Entity


class Room(Entity[str]):
    """在庫の部屋エンティティ

    在庫は外部で登録されるため、このサービスは空き状況のみを変更する。
    """

    def __init__(self, id: str, room_type: RoomType, is_available: bool = True) -> None:
        super().__init__(id)
        self._room_type = room_type
        self._is_available = is_available

    @property
    def room_type(self) -> RoomType:
        return self._room_type

    @property
    def is_available(self) -> bool:
        return self._is_available
