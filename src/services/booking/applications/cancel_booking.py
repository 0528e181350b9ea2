from datetime import date

from aws_lambda_powertools import Logger

from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.service.inventory_mutator import InventoryMutator
from services.booking.domain.value_object import BookingId, BookingPolicy
from services.shared.domain.exception import (
    InventoryUpdateFailedException,
    ResourceNotFoundException,
)

logger = Logger(child=True)


class CancelBookingService:
    """予約キャンセルユースケース"""

    def __init__(
        self,
        repository: BookingRepository,
        mutator: InventoryMutator,
        policy: BookingPolicy,
    ) -> None:
        self._repository = repository
        self._mutator = mutator
        self._policy = policy

    def cancel(self, booking_id: BookingId, today: date) -> Booking:
        """予約をキャンセルし、割り当てていた部屋をすべて空室に戻す

        Raises:
            ResourceNotFoundException: 予約が存在しない場合
            CancellationWindowExpiredException: キャンセル期限を過ぎている場合
        """
        booking = self._repository.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")

        booking.ensure_cancellable(today, self._policy.cancellation_window_days)

        try:
            self._mutator.apply(to_release=booking.room_ids, to_occupy=())
        except InventoryUpdateFailedException:
            logger.error(
                "Rooms partially released, booking kept",
                extra={"booking_id": str(booking.id), "room_ids": list(booking.room_ids)},
            )
            raise

        self._repository.delete(booking.id)
        return booking
