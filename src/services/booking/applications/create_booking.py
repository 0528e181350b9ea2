from datetime import date
from typing import TypedDict

from aws_lambda_powertools import Logger

from services.booking.applications.validation import validate_reservation
from services.booking.domain.entity import Booking
from services.booking.domain.factory import BookingFactory
from services.booking.domain.repository import BookingRepository, RoomRepository
from services.booking.domain.service.inventory_allocator import InventoryAllocator
from services.booking.domain.service.inventory_mutator import InventoryMutator
from services.booking.domain.service.pricing_calculator import PricingCalculator
from services.booking.domain.value_object import (
    BookingPolicy,
    GuestContact,
    RoomCounts,
    StayPeriod,
)
from services.shared.domain.exception import InventoryUpdateFailedException

logger = Logger(child=True)


class BookingDetails(TypedDict):
    """新規予約の入力データ構造"""

    name: str
    email: str
    guests: int
    num_of_single_rooms: int
    num_of_double_rooms: int
    num_of_suite_rooms: int
    check_in: str
    check_out: str


class CreateBookingService:
    """予約作成ユースケース

    検証 → 割り当て → 料金計算 → 予約の保存 → 在庫の更新 の順に行う。
    予約の保存後に在庫更新が失敗した場合はロールバックしない。
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        room_repository: RoomRepository,
        factory: BookingFactory,
        allocator: InventoryAllocator,
        mutator: InventoryMutator,
        pricing: PricingCalculator,
        policy: BookingPolicy,
    ) -> None:
        self._booking_repository = booking_repository
        self._room_repository = room_repository
        self._factory = factory
        self._allocator = allocator
        self._mutator = mutator
        self._pricing = pricing
        self._policy = policy

    def create(self, details: BookingDetails, today: date) -> Booking:
        """予約を作成する"""
        # 1. プリミティブ型から Value Object に変換して検証
        guest = GuestContact(name=details["name"], email=details["email"])
        stay_period = StayPeriod(
            check_in=details["check_in"], check_out=details["check_out"]
        )
        room_counts = RoomCounts(
            single=details["num_of_single_rooms"],
            double=details["num_of_double_rooms"],
            suite=details["num_of_suite_rooms"],
        )
        validate_reservation(
            stay_period, details["guests"], room_counts, self._policy, today
        )

        # 2. 空室スナップショットから部屋を割り当てる
        allocation = self._allocator.allocate(
            room_counts,
            held_rooms=[],
            available_rooms=self._room_repository.find_available(),
        )

        # 3. 料金計算と予約の保存
        total_price = self._pricing.compute_total_price(
            room_counts, stay_period.nights()
        )
        booking = self._factory.create(
            guest=guest,
            stay_period=stay_period,
            guests=details["guests"],
            room_counts=room_counts,
            room_ids=allocation.assigned_room_ids,
            total_price=total_price,
        )
        self._booking_repository.save(booking)

        # 4. 在庫の反映
        try:
            self._mutator.apply(allocation.to_release, allocation.to_occupy)
        except InventoryUpdateFailedException:
            logger.error(
                "Booking saved but inventory is out of sync",
                extra={
                    "booking_id": str(booking.id),
                    "room_ids": list(allocation.to_occupy),
                },
            )
            raise

        return booking
