from unittest.mock import MagicMock

import pytest

from services.booking.applications.create_booking import CreateBookingService
from services.booking.domain.enum import RoomType
from services.booking.domain.factory import BookingFactory
from services.booking.domain.service.inventory_allocator import InventoryAllocator
from services.booking.domain.service.inventory_mutator import InventoryMutator
from services.booking.domain.service.pricing_calculator import PricingCalculator
from services.shared.domain.exception import (
    InsufficientInventoryException,
    InvalidDateRangeException,
    InventoryUpdateFailedException,
    ValidationException,
)


class TestCreateBookingService:
    def test_one_double_for_two_nights(
        self, build_services, room_inventory, booking_store, booking_details, today
    ):
        rooms = room_inventory()
        create, _, _ = build_services(rooms)

        booking = create.create(booking_details(), today)

        assert booking.total_price == 2000
        assert booking.room_ids == ("D1",)
        assert rooms.availability()["D1"] is False
        assert booking_store.find_by_id(booking.id) is booking

    def test_mixed_room_types(self, build_services, room_inventory, booking_details, today):
        rooms = room_inventory()
        create, _, _ = build_services(rooms)

        booking = create.create(
            booking_details(
                guests=3,
                num_of_single_rooms=1,
                num_of_double_rooms=0,
                num_of_suite_rooms=1,
            ),
            today,
        )

        assert booking.room_ids == ("S1", "U1")
        assert booking.total_price == 2 * (500 + 1500)

    def test_insufficient_inventory_changes_nothing(
        self, build_services, room_inventory, booking_store, booking_details, today
    ):
        rooms = room_inventory(occupied=("S3",))
        create, _, _ = build_services(rooms)

        with pytest.raises(InsufficientInventoryException) as exc_info:
            create.create(
                booking_details(guests=3, num_of_single_rooms=3, num_of_double_rooms=0),
                today,
            )

        shortage = exc_info.value.shortages[0]
        assert (shortage.room_type, shortage.requested, shortage.available) == (
            "Single",
            3,
            2,
        )
        assert rooms.updates == []
        assert booking_store.find_all() == []

    def test_too_many_guests(self, build_services, room_inventory, booking_details, today):
        create, _, _ = build_services(room_inventory())

        with pytest.raises(ValidationException, match="beds"):
            create.create(booking_details(guests=3), today)

    def test_past_check_in(self, build_services, room_inventory, booking_details, today):
        create, _, _ = build_services(room_inventory())

        with pytest.raises(InvalidDateRangeException):
            create.create(
                booking_details(check_in="2029-12-30", check_out="2030-01-02"), today
            )

    def test_inventory_failure_keeps_saved_booking(
        self, booking_details, today, policy, create_room
    ):
        room_repository = MagicMock()
        room_repository.find_available.return_value = [
            create_room("D1", RoomType.DOUBLE)
        ]
        room_repository.set_availability.side_effect = InventoryUpdateFailedException(
            "D1", "room is not available"
        )
        booking_repository = MagicMock()
        service = CreateBookingService(
            booking_repository=booking_repository,
            room_repository=room_repository,
            factory=BookingFactory(),
            allocator=InventoryAllocator(),
            mutator=InventoryMutator(room_repository),
            pricing=PricingCalculator(policy.nightly_rates),
            policy=policy,
        )

        with pytest.raises(InventoryUpdateFailedException):
            service.create(booking_details(), today)

        booking_repository.save.assert_called_once()
        booking_repository.delete.assert_not_called()
