import datetime
import json

from aws_cdk import Duration
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

from infra.constructs.layers import RUNTIME

SERVICE_NAME = "booking-service"


class Functions(Construct):
    """Lambda 関数を管理する Construct

    料金・定員・キャンセル期限のポリシーは環境変数として渡す。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        bookings_table: dynamodb.Table,
        inventory_table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
        policy: dict | None = None,
    ) -> None:
        super().__init__(scope, id)

        environment = {
            "BOOKINGS_TABLE_NAME": bookings_table.table_name,
            "INVENTORY_TABLE_NAME": inventory_table.table_name,
            "POWERTOOLS_SERVICE_NAME": SERVICE_NAME,
            "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            **self._policy_environment(policy or {}),
        }

        self.create_booking = self._create_function(
            "CreateBookingLambda",
            "services.booking.handlers.create.lambda_handler",
            environment,
            common_layer,
        )

        self.update_booking = self._create_function(
            "UpdateBookingLambda",
            "services.booking.handlers.update.lambda_handler",
            environment,
            common_layer,
        )

        self.cancel_booking = self._create_function(
            "CancelBookingLambda",
            "services.booking.handlers.cancel.lambda_handler",
            environment,
            common_layer,
        )

        self.list_bookings = self._create_function(
            "ListBookingsLambda",
            "services.booking.handlers.list_bookings.lambda_handler",
            environment,
            common_layer,
        )

        for fn in [self.create_booking, self.update_booking, self.cancel_booking]:
            bookings_table.grant_read_write_data(fn)
            inventory_table.grant_read_write_data(fn)

        bookings_table.grant_read_data(self.list_bookings)

        self.mutating_functions = [
            self.create_booking,
            self.update_booking,
            self.cancel_booking,
        ]
        self.all_functions = [*self.mutating_functions, self.list_bookings]

    @staticmethod
    def _policy_environment(policy: dict) -> dict[str, str]:
        """cdk.json の context で指定されたポリシーを環境変数に変換する"""
        environment: dict[str, str] = {}
        if "nightlyRates" in policy:
            environment["NIGHTLY_RATES"] = json.dumps(policy["nightlyRates"])
        if "bedCapacity" in policy:
            environment["BED_CAPACITY"] = json.dumps(policy["bedCapacity"])
        if "cancellationWindowDays" in policy:
            environment["CANCELLATION_WINDOW_DAYS"] = str(
                policy["cancellationWindowDays"]
            )
        return environment

    def _create_function(
        self,
        id: str,
        handler: str,
        environment: dict[str, str],
        common_layer: _lambda.LayerVersion,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=RUNTIME,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[common_layer],
            timeout=Duration.seconds(10),
            environment=environment,
        )
