from services.booking.domain.entity import Room
from services.booking.domain.enum import RoomType


class TestRoom:
    def test_room_properties(self):
        room = Room(id="U1", room_type=RoomType.SUITE, is_available=False)
        assert room.room_type == RoomType.SUITE
        assert room.is_available is False

    def test_room_type_from_stored_value(self):
        assert RoomType("Double") is RoomType.DOUBLE
