import json
from decimal import Decimal


def _json_default(value: object) -> object:
    # DynamoDB の数値は Decimal で返ってくる
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    return str(value)


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway Lambda プロキシ統合のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=_json_default),
    }
