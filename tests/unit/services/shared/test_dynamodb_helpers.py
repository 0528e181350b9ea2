from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from services.shared.domain.exception import StoreException
from services.shared.infrastructure import (
    is_conditional_check_failure,
    scan_all,
    to_int,
)


class TestScanAll:
    def test_scan_failure(self):
        table = MagicMock()
        table.scan.side_effect = ClientError(
            {"Error": {"Code": "ResourceNotFoundException", "Message": "no table"}}, "Scan"
        )

        with pytest.raises(StoreException):
            scan_all(table)

    def test_passes_scan_options(self):
        table = MagicMock()
        table.scan.return_value = {"Items": [{"roomId": "S1"}]}

        assert scan_all(table, ConsistentRead=True) == [{"roomId": "S1"}]
        table.scan.assert_called_once_with(ConsistentRead=True)


def test_to_int():
    assert to_int(Decimal("3")) == 3
    assert to_int(None) == 0
    assert to_int(None, default=5) == 5


def test_is_conditional_check_failure():
    error = ClientError({"Error": {"Code": "ConditionalCheckFailedException"}}, "PutItem")
    assert is_conditional_check_failure(error) is True
