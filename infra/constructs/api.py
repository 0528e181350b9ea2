from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Api(Construct):
    """API Gateway Construct

    POST   /bookings       -> 予約作成
    GET    /bookings       -> 予約一覧
    PUT    /bookings/{id}  -> 予約変更
    DELETE /bookings/{id}  -> 予約キャンセル
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        create_booking: _lambda.IFunction,
        list_bookings: _lambda.IFunction,
        update_booking: _lambda.IFunction,
        cancel_booking: _lambda.IFunction,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "BookingRestApi",
            rest_api_name="Hotel Booking API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=10,
                throttling_rate_limit=5,
            ),
        )

        bookings_resource = self.rest_api.root.add_resource("bookings")
        bookings_resource.add_method("POST", apigw.LambdaIntegration(create_booking))
        bookings_resource.add_method("GET", apigw.LambdaIntegration(list_bookings))

        booking_resource = bookings_resource.add_resource("{id}")
        booking_resource.add_method("PUT", apigw.LambdaIntegration(update_booking))
        booking_resource.add_method("DELETE", apigw.LambdaIntegration(cancel_booking))
