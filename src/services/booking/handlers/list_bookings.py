from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.list_bookings import ListBookingsService
from services.booking.handlers.response_models import (
    BookingListData,
    domain_error_response,
    error_response,
    success_response,
    to_summary,
)
from services.booking.infrastructure import DynamoDBBookingRepository
from services.shared.domain import DomainException

logger = Logger()

service = ListBookingsService(repository=DynamoDBBookingRepository())


@logger.inject_lambda_context(clear_state=True)
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約一覧取得 Lambda Handler（GET /bookings）"""
    logger.info("Listing all bookings")

    try:
        bookings = service.list_bookings()
    except DomainException as e:
        logger.exception("Failed to list bookings")
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to list bookings")
        return error_response(500, "INTERNAL_ERROR", "Internal server error")

    return success_response(
        200, BookingListData(bookings=[to_summary(booking) for booking in bookings])
    )
