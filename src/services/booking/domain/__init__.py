from .entity import Booking, Room
from .enum import RoomType
from .factory import BookingFactory
from .repository import BookingRepository, RoomRepository
from .value_object import (
    AllocationResult,
    BookingId,
    BookingPolicy,
    GuestContact,
    RoomCounts,
    StayPeriod,
)

__all__ = [
    "AllocationResult",
    "Booking",
    "BookingFactory",
    "BookingId",
    "BookingPolicy",
    "BookingRepository",
    "GuestContact",
    "Room",
    "RoomCounts",
    "RoomRepository",
    "RoomType",
    "StayPeriod",
]
