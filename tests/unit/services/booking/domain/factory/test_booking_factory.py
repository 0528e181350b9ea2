from services.booking.domain.factory import BookingFactory
from services.booking.domain.value_object import (
    BookingId,
    GuestContact,
    RoomCounts,
    StayPeriod,
)


class TestBookingFactory:
    def test_create_assigns_generated_id(self):
        factory = BookingFactory(id_generator=lambda: BookingId(value="fixed-id"))

        booking = factory.create(
            guest=GuestContact(name="Hanako", email="hanako@example.com"),
            stay_period=StayPeriod(check_in="2030-01-10", check_out="2030-01-12"),
            guests=1,
            room_counts=RoomCounts(single=1),
            room_ids=["S1"],
            total_price=1000,
        )

        assert booking.id == BookingId(value="fixed-id")
        assert booking.room_ids == ("S1",)
        assert booking.guest.email == "hanako@example.com"
