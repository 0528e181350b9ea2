import os
import threading
from datetime import date

import pytest

# ハンドラモジュールは import 時に boto3 リソースを生成するため、先に設定しておく
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("BOOKINGS_TABLE_NAME", "test-bookings")
os.environ.setdefault("INVENTORY_TABLE_NAME", "test-inventory")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "booking-service-test")

from services.booking.domain.entity import Booking, Room  # noqa: E402
from services.booking.domain.enum import RoomType  # noqa: E402
from services.booking.domain.repository import (  # noqa: E402
    BookingRepository,
    RoomRepository,
)
from services.booking.domain.value_object import (  # noqa: E402
    BookingId,
    BookingPolicy,
    GuestContact,
    RoomCounts,
    StayPeriod,
)
from services.shared.domain.exception import (  # noqa: E402
    InventoryUpdateFailedException,
)


class InMemoryRoomRepository(RoomRepository):
    """テスト用の在庫リポジトリ（DynamoDB の条件付き更新と同じ振る舞い）"""

    def __init__(self, rooms: list[Room]) -> None:
        self._lock = threading.Lock()
        self._rooms = {room.id: room for room in rooms}
        self.updates: list[tuple[str, bool]] = []

    def find_by_id(self, room_id: str) -> Room | None:
        return self._rooms.get(room_id)

    def find_available(self) -> list[Room]:
        return [room for room in self._rooms.values() if room.is_available]

    def set_availability(self, room_id: str, available: bool) -> None:
        with self._lock:
            room = self._rooms.get(room_id)
            if room is None:
                raise InventoryUpdateFailedException(room_id, "room does not exist")
            if not available and not room.is_available:
                raise InventoryUpdateFailedException(room_id, "room is not available")
            self._rooms[room_id] = Room(
                id=room_id, room_type=room.room_type, is_available=available
            )
            self.updates.append((room_id, available))

    def availability(self) -> dict[str, bool]:
        return {room_id: room.is_available for room_id, room in self._rooms.items()}


class InMemoryBookingRepository(BookingRepository):
    """テスト用の予約リポジトリ"""

    def __init__(self) -> None:
        self._bookings: dict[str, Booking] = {}

    def save(self, booking: Booking) -> None:
        self._bookings[str(booking.id)] = booking

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        return self._bookings.get(str(booking_id))

    def find_all(self) -> list[Booking]:
        return list(self._bookings.values())

    def update(self, booking: Booking) -> None:
        self._bookings[str(booking.id)] = booking

    def delete(self, booking_id: BookingId) -> None:
        self._bookings.pop(str(booking_id), None)


@pytest.fixture
def today():
    """全テスト共通の基準日"""
    return date(2030, 1, 1)


@pytest.fixture
def policy():
    return BookingPolicy()


@pytest.fixture
def create_room():
    """Room を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        room_id: str = "S1",
        room_type: RoomType = RoomType.SINGLE,
        is_available: bool = True,
    ) -> Room:
        return Room(id=room_id, room_type=room_type, is_available=is_available)

    return _factory


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture"""

    def _factory(
        booking_id: str = "booking-123",
        name: str = "Taro Yamada",
        email: str = "taro@example.com",
        check_in: str = "2030-01-10",
        check_out: str = "2030-01-12",
        guests: int = 2,
        single: int = 0,
        double: int = 1,
        suite: int = 0,
        room_ids: tuple[str, ...] = ("D1",),
        total_price: int = 2000,
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            guest=GuestContact(name=name, email=email),
            stay_period=StayPeriod(check_in=check_in, check_out=check_out),
            guests=guests,
            room_counts=RoomCounts(single=single, double=double, suite=suite),
            room_ids=room_ids,
            total_price=total_price,
        )

    return _factory


@pytest.fixture
def room_inventory():
    """Single 3室 / Double 2室 / Suite 1室 の在庫"""

    def _factory(occupied: tuple[str, ...] = ()) -> InMemoryRoomRepository:
        layout = [
            ("S1", RoomType.SINGLE),
            ("S2", RoomType.SINGLE),
            ("S3", RoomType.SINGLE),
            ("D1", RoomType.DOUBLE),
            ("D2", RoomType.DOUBLE),
            ("U1", RoomType.SUITE),
        ]
        return InMemoryRoomRepository(
            [
                Room(id=room_id, room_type=room_type, is_available=room_id not in occupied)
                for room_id, room_type in layout
            ]
        )

    return _factory


@pytest.fixture
def booking_store():
    return InMemoryBookingRepository()
