import json

import pytest

from services.booking.domain.value_object import BookingId
from services.booking.handlers import cancel
from services.shared.domain.exception import (
    CancellationWindowExpiredException,
    ResourceNotFoundException,
)


def parse_body(response: dict) -> dict:
    return json.loads(response["body"])


@pytest.fixture(autouse=True)
def service(monkeypatch, mock_service):
    monkeypatch.setattr(cancel, "service", mock_service)
    return mock_service


class TestCancelHandler:
    def test_cancelled(self, service, api_event, lambda_context, create_booking):
        service.cancel.return_value = create_booking()

        response = cancel.lambda_handler(
            api_event(booking_id="booking-123"), lambda_context
        )

        assert response["statusCode"] == 200
        assert parse_body(response)["data"] == {
            "message": "Booking successfully deleted",
            "bookingId": "booking-123",
        }
        assert service.cancel.call_args.args[0] == BookingId(value="booking-123")

    def test_missing_booking_id(self, service, api_event, lambda_context):
        response = cancel.lambda_handler(api_event(), lambda_context)

        assert response["statusCode"] == 400
        service.cancel.assert_not_called()

    def test_within_cancellation_window(self, service, api_event, lambda_context):
        service.cancel.side_effect = CancellationWindowExpiredException("too late")

        response = cancel.lambda_handler(api_event(booking_id="booking-123"), lambda_context)

        assert response["statusCode"] == 400
        assert parse_body(response)["error_code"] == "CANCELLATION_WINDOW_EXPIRED"

    def test_not_found(self, service, api_event, lambda_context):
        service.cancel.side_effect = ResourceNotFoundException("Booking not found")

        response = cancel.lambda_handler(api_event(booking_id="missing"), lambda_context)

        assert response["statusCode"] == 404

    def test_unexpected_error(self, service, api_event, lambda_context):
        service.cancel.side_effect = RuntimeError("boom")

        response = cancel.lambda_handler(api_event(booking_id="booking-123"), lambda_context)

        assert response["statusCode"] == 500
        assert parse_body(response)["message"] == "Could not delete Booking"
