import os

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import (
    BookingId,
    GuestContact,
    RoomCounts,
    StayPeriod,
)
from services.shared.domain.exception import (
    DuplicateResourceException,
    ResourceNotFoundException,
    StoreException,
)
from services.shared.infrastructure import (
    is_conditional_check_failure,
    scan_all,
    to_int,
)


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    パーティションキーは bookingId。属性名は API と同じ camelCase を使う。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("BOOKINGS_TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, booking: Booking) -> None:
        """予約をDBに保存する"""
        try:
            self.table.put_item(
                Item=self._to_item(booking),
                ConditionExpression=Attr("bookingId").not_exists(),
            )
        except ClientError as e:
            if is_conditional_check_failure(e):
                raise DuplicateResourceException(
                    f"Booking already exists: {booking.id}"
                ) from e
            raise StoreException(f"Could not save booking {booking.id}: {e}") from e

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索（強い整合性）"""
        try:
            response = self.table.get_item(
                Key={"bookingId": str(booking_id)},
                ConsistentRead=True,
            )
        except ClientError as e:
            raise StoreException(f"Could not read booking {booking_id}: {e}") from e
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_all(self) -> list[Booking]:
        """全予約を取得する（強い整合性）"""
        items = scan_all(self.table, ConsistentRead=True)
        return [self._to_entity(item) for item in items]

    def update(self, booking: Booking) -> None:
        """日程・人数・部屋構成・料金を更新する"""
        counts = booking.room_counts
        try:
            self.table.update_item(
                Key={"bookingId": str(booking.id)},
                UpdateExpression=(
                    "SET checkIn = :check_in, checkOut = :check_out, "
                    "guests = :guests, numOfSingleRooms = :single, "
                    "numOfDoubleRooms = :double, numOfSuiteRooms = :suite, "
                    "roomIds = :room_ids, totalPrice = :total_price"
                ),
                ExpressionAttributeValues={
                    ":check_in": booking.stay_period.check_in,
                    ":check_out": booking.stay_period.check_out,
                    ":guests": booking.guests,
                    ":single": counts.single,
                    ":double": counts.double,
                    ":suite": counts.suite,
                    ":room_ids": list(booking.room_ids),
                    ":total_price": booking.total_price,
                },
                ConditionExpression=Attr("bookingId").exists(),
            )
        except ClientError as e:
            if is_conditional_check_failure(e):
                raise ResourceNotFoundException(
                    f"Booking not found: {booking.id}"
                ) from e
            raise StoreException(f"Could not update booking {booking.id}: {e}") from e

    def delete(self, booking_id: BookingId) -> None:
        """予約を削除する"""
        try:
            self.table.delete_item(Key={"bookingId": str(booking_id)})
        except ClientError as e:
            raise StoreException(f"Could not delete booking {booking_id}: {e}") from e

    def _to_item(self, booking: Booking) -> dict:
        counts = booking.room_counts
        return {
            "bookingId": str(booking.id),
            "name": booking.guest.name,
            "email": booking.guest.email,
            "guests": booking.guests,
            "numOfSingleRooms": counts.single,
            "numOfDoubleRooms": counts.double,
            "numOfSuiteRooms": counts.suite,
            "checkIn": booking.stay_period.check_in,
            "checkOut": booking.stay_period.check_out,
            "roomIds": list(booking.room_ids),
            "totalPrice": booking.total_price,
        }

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Booking(
            id=BookingId(value=item["bookingId"]),
            guest=GuestContact(name=item["name"], email=item["email"]),
            stay_period=StayPeriod(
                check_in=item["checkIn"],
                check_out=item["checkOut"],
            ),
            guests=to_int(item.get("guests")),
            room_counts=RoomCounts(
                single=to_int(item.get("numOfSingleRooms")),
                double=to_int(item.get("numOfDoubleRooms")),
                suite=to_int(item.get("numOfSuiteRooms")),
            ),
            room_ids=list(item.get("roomIds", [])),
            total_price=to_int(item.get("totalPrice")),
        )
