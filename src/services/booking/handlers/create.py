from datetime import datetime, timezone

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.applications.create_booking import (
    BookingDetails,
    CreateBookingService,
)
from services.booking.config import inventory_max_workers, load_policy
from services.booking.domain.factory import BookingFactory
from services.booking.domain.service.inventory_allocator import InventoryAllocator
from services.booking.domain.service.inventory_mutator import InventoryMutator
from services.booking.domain.service.pricing_calculator import PricingCalculator
from services.booking.handlers.request_models import CreateBookingRequest
from services.booking.handlers.response_models import (
    domain_error_response,
    error_response,
    success_response,
    to_created_data,
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
service = CreateBookingService(
    booking_repository=DynamoDBBookingRepository(),
    room_repository=room_repository,
    factory=BookingFactory(),
    allocator=InventoryAllocator(),
    mutator=InventoryMutator(room_repository, max_workers=inventory_max_workers()),
    pricing=PricingCalculator(policy.nightly_rates),
    policy=policy,
)


def _to_booking_details(request: CreateBookingRequest) -> BookingDetails:
    """リクエストボディから BookingDetails を構築する"""
    return {
        "name": request.name,
        "email": request.email,
        "guests": request.guests,
        "num_of_single_rooms": request.num_of_single_rooms,
        "num_of_double_rooms": request.num_of_double_rooms,
        "num_of_suite_rooms": request.num_of_suite_rooms,
        "check_in": request.check_in,
        "check_out": request.check_out,
    }


@logger.inject_lambda_context(clear_state=True)
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約作成 Lambda Handler（POST /bookings）"""
    logger.info("Received create booking request")

    try:
        request = CreateBookingRequest.model_validate_json(event.body or "")
        today = datetime.now(timezone.utc).date()
        booking = service.create(_to_booking_details(request), today)
    except ValidationError as e:
        logger.warning("Invalid create booking request", extra={"errors": e.error_count()})
        return validation_error_response(e)
    except StoreException as e:
        logger.exception("Store failure while creating booking")
        return domain_error_response(e)
    except DomainException as e:
        logger.warning("Create booking rejected", extra={"reason": str(e)})
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to create booking")
        return error_response(500, "INTERNAL_ERROR", "Internal server error")

    logger.info(
        "Booking created",
        extra={"booking_id": str(booking.id), "room_ids": list(booking.room_ids)},
    )
    return success_response(201, to_created_data(booking))
