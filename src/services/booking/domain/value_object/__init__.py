from .allocation_result import AllocationResult
from .booking_id import BookingId
from .booking_policy import BookingPolicy
from .guest_contact import GuestContact
from .room_counts import RoomCounts
from .stay_period import StayPeriod

__all__ = [
    "AllocationResult",
    "BookingId",
    "BookingPolicy",
    "GuestContact",
    "RoomCounts",
    "StayPeriod",
]
