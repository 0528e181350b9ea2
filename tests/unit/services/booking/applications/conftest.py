import pytest

from services.booking.applications.cancel_booking import CancelBookingService
from services.booking.applications.create_booking import CreateBookingService
from services.booking.applications.update_booking import UpdateBookingService
from services.booking.domain.factory import BookingFactory
from services.booking.domain.service.inventory_allocator import InventoryAllocator
from services.booking.domain.service.inventory_mutator import InventoryMutator
from services.booking.domain.service.pricing_calculator import PricingCalculator
from services.booking.domain.value_object import BookingId


@pytest.fixture
def build_services(booking_store, policy):
    """同じ在庫・予約ストアを共有する作成/変更/キャンセルのユースケースを組み立てる"""

    def _factory(rooms):
        mutator = InventoryMutator(rooms, max_workers=4)
        pricing = PricingCalculator(policy.nightly_rates)
        allocator = InventoryAllocator()
        ids = iter(f"booking-{n}" for n in range(1, 100))
        create = CreateBookingService(
            booking_repository=booking_store,
            room_repository=rooms,
            factory=BookingFactory(id_generator=lambda: BookingId(value=next(ids))),
            allocator=allocator,
            mutator=mutator,
            pricing=pricing,
            policy=policy,
        )
        update = UpdateBookingService(
            booking_repository=booking_store,
            room_repository=rooms,
            allocator=allocator,
            mutator=mutator,
            pricing=pricing,
            policy=policy,
        )
        cancel = CancelBookingService(
            repository=booking_store, mutator=mutator, policy=policy
        )
        return create, update, cancel

    return _factory


@pytest.fixture
def booking_details():
    def _factory(**overrides):
        details = {
            "name": "Taro Yamada",
            "email": "taro@example.com",
            "guests": 2,
            "num_of_single_rooms": 0,
            "num_of_double_rooms": 1,
            "num_of_suite_rooms": 0,
            "check_in": "2030-01-10",
            "check_out": "2030-01-12",
        }
        details.update(overrides)
        return details

    return _factory
