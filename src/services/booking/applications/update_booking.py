from datetime import date
from typing import TypedDict

from aws_lambda_powertools import Logger

from services.booking.applications.validation import validate_reservation
from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository, RoomRepository
from services.booking.domain.service.inventory_allocator import InventoryAllocator
from services.booking.domain.service.inventory_mutator import InventoryMutator
from services.booking.domain.service.pricing_calculator import PricingCalculator
from services.booking.domain.value_object import (
    BookingId,
    BookingPolicy,
    RoomCounts,
    StayPeriod,
)
from services.shared.domain.exception import (
    InventoryUpdateFailedException,
    ResourceNotFoundException,
)

logger = Logger(child=True)


class BookingChanges(TypedDict, total=False):
    """予約変更の入力データ構造（指定された項目のみ変更する）"""

    guests: int
    num_of_single_rooms: int
    num_of_double_rooms: int
    num_of_suite_rooms: int
    check_in: str
    check_out: str


class UpdateBookingService:
    """予約変更ユースケース

    既存の部屋を優先して使い回し、在庫は差分だけを更新する。
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        room_repository: RoomRepository,
        allocator: InventoryAllocator,
        mutator: InventoryMutator,
        pricing: PricingCalculator,
        policy: BookingPolicy,
    ) -> None:
        self._booking_repository = booking_repository
        self._room_repository = room_repository
        self._allocator = allocator
        self._mutator = mutator
        self._pricing = pricing
        self._policy = policy

    def update(
        self, booking_id: BookingId, changes: BookingChanges, today: date
    ) -> Booking:
        """予約を変更する

        Raises:
            ResourceNotFoundException: 予約が存在しない場合
        """
        booking = self._booking_repository.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")

        current = booking.room_counts
        stay_period = StayPeriod(
            check_in=changes.get("check_in", booking.stay_period.check_in),
            check_out=changes.get("check_out", booking.stay_period.check_out),
        )
        guests = changes.get("guests", booking.guests)
        room_counts = RoomCounts(
            single=changes.get("num_of_single_rooms", current.single),
            double=changes.get("num_of_double_rooms", current.double),
            suite=changes.get("num_of_suite_rooms", current.suite),
        )
        validate_reservation(stay_period, guests, room_counts, self._policy, today)

        allocation = self._allocator.allocate(
            room_counts,
            held_rooms=self._room_repository.find_by_ids(booking.room_ids),
            available_rooms=self._room_repository.find_available(),
        )
        total_price = self._pricing.compute_total_price(
            room_counts, stay_period.nights()
        )

        booking.reschedule(
            stay_period=stay_period,
            guests=guests,
            room_counts=room_counts,
            room_ids=allocation.assigned_room_ids,
            total_price=total_price,
        )
        self._booking_repository.update(booking)

        try:
            self._mutator.apply(allocation.to_release, allocation.to_occupy)
        except InventoryUpdateFailedException:
            logger.error(
                "Booking updated but inventory is out of sync",
                extra={
                    "booking_id": str(booking.id),
                    "released": list(allocation.to_release),
                    "occupied": list(allocation.to_occupy),
                },
            )
            raise

        return booking
