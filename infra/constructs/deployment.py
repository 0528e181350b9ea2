from aws_cdk import Duration
from aws_cdk import aws_cloudwatch as cloudwatch
from aws_cdk import aws_codedeploy as codedeploy
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

ALIAS_NAME = "Prod"

# 在庫テーブルへの並列更新が詰まるとタイムアウト（10秒）に近づく
DURATION_P99_THRESHOLD_MS = 8000


class Deployment(Construct):
    """在庫を変更する関数のカナリアデプロイを管理する Construct

    エラー率またはレイテンシのアラームが発火したら自動でロールバックする。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        create_booking: _lambda.Function,
        update_booking: _lambda.Function,
        cancel_booking: _lambda.Function,
    ) -> None:
        super().__init__(scope, id)

        aliases = {
            name: self._create_canary_deployment(name, fn)
            for name, fn in (
                ("CreateBooking", create_booking),
                ("UpdateBooking", update_booking),
                ("CancelBooking", cancel_booking),
            )
        }
        self.create_booking_alias = aliases["CreateBooking"]
        self.update_booking_alias = aliases["UpdateBooking"]
        self.cancel_booking_alias = aliases["CancelBooking"]

    def _create_canary_deployment(
        self,
        name: str,
        fn: _lambda.Function,
    ) -> _lambda.Alias:
        alias = _lambda.Alias(
            self,
            f"{name}Alias",
            alias_name=ALIAS_NAME,
            version=fn.current_version,
        )

        alarms = [
            self._alarm(
                f"{name}ErrorRateAlarm",
                cloudwatch.MathExpression(
                    expression="(errors / invocations) * 100",
                    using_metrics={
                        "errors": fn.metric_errors(statistic="Sum"),
                        "invocations": fn.metric_invocations(statistic="Sum"),
                    },
                    label=f"{name} Error Rate %",
                    period=Duration.minutes(1),
                ),
                threshold=5,
            ),
            self._alarm(
                f"{name}DurationAlarm",
                fn.metric_duration(statistic="p99", period=Duration.minutes(1)),
                threshold=DURATION_P99_THRESHOLD_MS,
            ),
        ]

        codedeploy.LambdaDeploymentGroup(
            self,
            f"{name}DeploymentGroup",
            alias=alias,
            deployment_config=codedeploy.LambdaDeploymentConfig.CANARY_10_PERCENT_5_MINUTES,
            alarms=alarms,
        )

        return alias

    def _alarm(
        self, id: str, metric: cloudwatch.IMetric, threshold: float
    ) -> cloudwatch.Alarm:
        return cloudwatch.Alarm(
            self,
            id,
            metric=metric,
            threshold=threshold,
            evaluation_periods=2,
            comparison_operator=cloudwatch.ComparisonOperator.GREATER_THAN_OR_EQUAL_TO_THRESHOLD,
            treat_missing_data=cloudwatch.TreatMissingData.NOT_BREACHING,
        )
