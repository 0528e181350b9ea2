from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from services.booking.domain.entity import Booking
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    CancellationWindowExpiredException,
    DomainException,
    DuplicateResourceException,
    InsufficientInventoryException,
    InvalidDateRangeException,
    InventoryUpdateFailedException,
    ResourceNotFoundException,
    StoreException,
    ValidationException,
)
from services.shared.utils import api_response

T = TypeVar("T")


class _ResponseModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreatedBookingData(_ResponseModel):
    """予約作成レスポンスのデータ"""

    message: str = "Booking successful"
    booking_id: str
    room_ids: list[str]
    total_price: int


class BookingSummary(_ResponseModel):
    """予約一覧の1件分（室数 0 の部屋タイプは出力しない）"""

    booking_id: str
    name: str
    check_in: str
    check_out: str
    guests: int
    num_of_single_rooms: int | None = None
    num_of_double_rooms: int | None = None
    num_of_suite_rooms: int | None = None


class BookingListData(_ResponseModel):
    bookings: list[BookingSummary]


class UpdatedAttributes(_ResponseModel):
    check_in: str
    check_out: str
    guests: int
    num_of_single_rooms: int
    num_of_double_rooms: int
    num_of_suite_rooms: int
    room_ids: list[str]
    total_price: int


class UpdatedBookingData(_ResponseModel):
    message: str = "Booking successfully updated"
    updated_attributes: UpdatedAttributes


class CancelledBookingData(_ResponseModel):
    message: str = "Booking successfully deleted"
    booking_id: str


class SuccessResponse(BaseModel, Generic[T]):
    """成功レスポンスモデル"""

    status: str = "success"
    data: T


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None


def success_response(status_code: int, data: BaseModel) -> dict:
    """成功レスポンスを生成"""
    body = SuccessResponse(data=data).model_dump(by_alias=True, exclude_none=True)
    return api_response(status_code, body)


def error_response(
    status_code: int, error_code: str, message: str, details: list | None = None
) -> dict:
    """エラーレスポンスを生成"""
    body = ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
    ).model_dump(exclude_none=True)
    return api_response(status_code, body)


def validation_error_response(error: ValidationError) -> dict:
    """リクエストボディの検証エラーを 400 に変換する"""
    return error_response(
        400,
        "VALIDATION_ERROR",
        "Invalid request body",
        details=error.errors(include_url=False, include_context=False, include_input=False),
    )


# 先に一致したものを使うため、サブクラスを基底クラスより前に並べる
_DOMAIN_ERRORS: list[tuple[type[DomainException], int, str]] = [
    (InsufficientInventoryException, 400, "INSUFFICIENT_INVENTORY"),
    (CancellationWindowExpiredException, 400, "CANCELLATION_WINDOW_EXPIRED"),
    (InvalidDateRangeException, 400, "INVALID_DATE_RANGE"),
    (ValidationException, 400, "VALIDATION_ERROR"),
    (ResourceNotFoundException, 404, "NOT_FOUND"),
    (DuplicateResourceException, 409, "CONFLICT"),
    (BusinessRuleViolationException, 400, "BUSINESS_RULE_VIOLATION"),
    (InventoryUpdateFailedException, 500, "INVENTORY_UPDATE_FAILED"),
    (StoreException, 500, "STORE_ERROR"),
]


def domain_error_response(error: DomainException) -> dict:
    """ドメイン例外を HTTP レスポンスに変換する

    5xx の場合は内部の詳細をクライアントに返さない。
    """
    for error_type, status_code, error_code in _DOMAIN_ERRORS:
        if isinstance(error, error_type):
            break
    else:
        status_code, error_code = 500, "INTERNAL_ERROR"

    if status_code >= 500:
        return error_response(
            status_code, error_code, "Could not complete the booking operation"
        )

    details = None
    if isinstance(error, InsufficientInventoryException):
        details = [
            {
                "roomType": shortage.room_type,
                "requested": shortage.requested,
                "available": shortage.available,
            }
            for shortage in error.shortages
        ]
    return error_response(status_code, error_code, str(error), details=details)


def to_created_data(booking: Booking) -> CreatedBookingData:
    return CreatedBookingData(
        booking_id=str(booking.id),
        room_ids=list(booking.room_ids),
        total_price=booking.total_price,
    )


def to_summary(booking: Booking) -> BookingSummary:
    """Entity を一覧用のサマリに変換（室数 0 は None にして出力から除く）"""
    counts = booking.room_counts
    return BookingSummary(
        booking_id=str(booking.id),
        name=booking.guest.name,
        check_in=booking.stay_period.check_in,
        check_out=booking.stay_period.check_out,
        guests=booking.guests,
        num_of_single_rooms=counts.single or None,
        num_of_double_rooms=counts.double or None,
        num_of_suite_rooms=counts.suite or None,
    )


def to_updated_data(booking: Booking) -> UpdatedBookingData:
    counts = booking.room_counts
    return UpdatedBookingData(
        updated_attributes=UpdatedAttributes(
            check_in=booking.stay_period.check_in,
            check_out=booking.stay_period.check_out,
            guests=booking.guests,
            num_of_single_rooms=counts.single,
            num_of_double_rooms=counts.double,
            num_of_suite_rooms=counts.suite,
            room_ids=list(booking.room_ids),
            total_price=booking.total_price,
        )
    )
