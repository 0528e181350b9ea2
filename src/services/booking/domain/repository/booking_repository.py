from abc import abstractmethod

from services.booking.domain.entity.booking import Booking
from services.booking.domain.value_object.booking_id import BookingId
from services.shared.domain import Repository


class BookingRepository(Repository[Booking, BookingId]):
    """予約リポジトリのインターフェース

    Domain 層で定義し、具象実装は Infrastructure 層で行う。
    読み出しはすべて強い整合性で行うこと（古い roomIds を元に割り当てないため）。
    """

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """新規予約を保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Booking]:
        """全予約を取得する"""
        raise NotImplementedError

    @abstractmethod
    def update(self, booking: Booking) -> None:
        """既存予約の日程・部屋構成・料金を更新する"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, booking_id: BookingId) -> None:
        """予約を削除する"""
        raise NotImplementedError
