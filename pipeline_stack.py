from aws_cdk import (
    Stack,
    Stage,
    pipelines,
    aws_codestarconnections as codestarconnections,
)
from constructs import Construct

from booking_service_stack import BookingServiceStack


class ApplicationStage(Stage):
    """予約サービスのスタックをまとめたステージ"""

    def __init__(self, scope: Construct, id: str, **kwargs) -> None:
        super().__init__(scope, id, **kwargs)

        self.service = BookingServiceStack(self, "BookingService")


class PipelineStack(Stack):
    """CI/CD パイプラインを定義するスタック

    接続先リポジトリは cdk.json の context（repository / branch）で指定する。
    """

    def __init__(self, scope: Construct, id: str, **kwargs) -> None:
        super().__init__(scope, id, **kwargs)

        repository = self.node.try_get_context("repository")
        branch = self.node.try_get_context("branch") or "main"
        if not repository:
            raise ValueError("context 'repository' (owner/name) is required")

        # 初回デプロイ後、コンソールで GitHub 接続の承認が必要
        connection = codestarconnections.CfnConnection(
            self,
            "GitHubConnection",
            connection_name="booking-service-github",
            provider_type="GitHub",
        )
        source = pipelines.CodePipelineSource.connection(
            repository,
            branch,
            connection_arn=connection.attr_connection_arn,
        )

        pipeline = pipelines.CodePipeline(
            self,
            "Pipeline",
            synth=pipelines.ShellStep(
                "Synth",
                input=source,
                env={"PYENV_VERSION": "3.13"},
                install_commands=[
                    "npm install -g aws-cdk",
                    "pip install -e '.[cdk,test]'",
                ],
                commands=[
                    "pytest tests/unit",
                    "cdk synth",
                ],
            ),
        )

        prod = ApplicationStage(self, "Prod")
        pipeline.add_stage(
            prod,
            pre=[
                pipelines.ManualApprovalStep(
                    "PromoteToProd",
                    comment="本番環境へデプロイします。テストと差分を確認のうえ承認してください。",
                )
            ],
            post=[
                # 一覧取得は在庫を変更しないため、デプロイ後の疎通確認に使う
                pipelines.ShellStep(
                    "SmokeTestListBookings",
                    env_from_cfn_outputs={"API_URL": prod.service.api_url_output},
                    commands=['curl --fail --silent "${API_URL}bookings"'],
                )
            ],
        )
