from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository


class ListBookingsService:
    """予約一覧取得ユースケース（在庫・予約を変更しない）"""

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def list_bookings(self) -> list[Booking]:
        return self._repository.find_all()
