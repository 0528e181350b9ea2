from datetime import datetime, timezone

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.cancel_booking import CancelBookingService
from services.booking.config import inventory_max_workers, load_policy
from services.booking.domain.service.inventory_mutator import InventoryMutator
from services.booking.domain.value_object import BookingId
from services.booking.handlers.response_models import (
    CancelledBookingData,
    domain_error_response,
    error_response,
    success_response,
)
from services.booking.infrastructure import (
    DynamoDBBookingRepository,
    DynamoDBRoomRepository,
)
from services.shared.domain import DomainException, StoreException

logger = Logger()

service = CancelBookingService(
    repository=DynamoDBBookingRepository(),
    mutator=InventoryMutator(
        DynamoDBRoomRepository(), max_workers=inventory_max_workers()
    ),
    policy=load_policy(),
)


@logger.inject_lambda_context(clear_state=True)
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約キャンセル Lambda Handler（DELETE /bookings/{id}）"""
    booking_id = (event.path_parameters or {}).get("id")
    if not booking_id:
        return error_response(400, "VALIDATION_ERROR", "A Booking ID is required")

    logger.append_keys(booking_id=booking_id)
    logger.info("Received cancel booking request")

    try:
        today = datetime.now(timezone.utc).date()
        booking = service.cancel(BookingId(value=booking_id), today)
    except StoreException as e:
        logger.exception("Store failure while cancelling booking")
        return domain_error_response(e)
    except DomainException as e:
        logger.warning("Cancel booking rejected", extra={"reason": str(e)})
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to cancel booking")
        return error_response(500, "INTERNAL_ERROR", "Could not delete Booking")

    logger.info("Booking cancelled", extra={"released": list(booking.room_ids)})
    return success_response(200, CancelledBookingData(booking_id=str(booking.id)))
