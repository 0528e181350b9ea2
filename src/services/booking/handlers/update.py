from datetime import datetime, timezone

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.applications.update_booking import (
    BookingChanges,
    UpdateBookingService,
)
from services.booking.config import inventory_max_workers, load_policy
from services.booking.domain.service.inventory_allocator import InventoryAllocator
from services.booking.domain.service.inventory_mutator import InventoryMutator
from services.booking.domain.service.pricing_calculator import PricingCalculator
from services.booking.domain.value_object import BookingId
from services.booking.handlers.request_models import UpdateBookingRequest
from services.booking.handlers.response_models import (
    domain_error_response,
    error_response,
    success_response,
    to_updated_data,
    validation_error_response,
)
from services.booking.infrastructure import (
    DynamoDBBookingRepository,
    DynamoDBRoomRepository,
)
from services.shared.domain import DomainException, StoreException

logger = Logger()

policy = load_policy()
room_repository = DynamoDBRoomRepository()
service = UpdateBookingService(
    booking_repository=DynamoDBBookingRepository(),
    room_repository=room_repository,
    allocator=InventoryAllocator(),
    mutator=InventoryMutator(room_repository, max_workers=inventory_max_workers()),
    pricing=PricingCalculator(policy.nightly_rates),
    policy=policy,
)


def _to_booking_changes(request: UpdateBookingRequest) -> BookingChanges:
    """指定された項目だけを BookingChanges に詰める"""
    return BookingChanges(**request.model_dump(exclude_none=True))


@logger.inject_lambda_context(clear_state=True)
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約変更 Lambda Handler（PUT /bookings/{id}）"""
    booking_id = (event.path_parameters or {}).get("id")
    if not booking_id:
        return error_response(400, "VALIDATION_ERROR", "A Booking ID is required")

    logger.append_keys(booking_id=booking_id)
    logger.info("Received update booking request")

    try:
        request = UpdateBookingRequest.model_validate_json(event.body or "")
        today = datetime.now(timezone.utc).date()
        booking = service.update(
            BookingId(value=booking_id), _to_booking_changes(request), today
        )
    except ValidationError as e:
        logger.warning("Invalid update booking request", extra={"errors": e.error_count()})
        return validation_error_response(e)
    except StoreException as e:
        logger.exception("Store failure while updating booking")
        return domain_error_response(e)
    except DomainException as e:
        logger.warning("Update booking rejected", extra={"reason": str(e)})
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to update booking")
        return error_response(500, "INTERNAL_ERROR", "Internal server error")

    logger.info("Booking updated", extra={"room_ids": list(booking.room_ids)})
    return success_response(200, to_updated_data(booking))
