import json
from dataclasses import dataclass
from unittest.mock import MagicMock

import pytest


@dataclass
class FakeLambdaContext:
    function_name: str = "booking-handler"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:booking-handler"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def api_event():
    """API Gateway プロキシ統合のイベントを生成する Factory fixture"""

    def _factory(body: dict | str | None = None, booking_id: str | None = None) -> dict:
        if isinstance(body, dict):
            body = json.dumps(body)
        return {
            "body": body,
            "pathParameters": {"id": booking_id} if booking_id else None,
            "httpMethod": "POST",
            "headers": {"Content-Type": "application/json"},
            "requestContext": {"requestId": "request-123"},
        }

    return _factory


@pytest.fixture
def mock_service():
    return MagicMock()
