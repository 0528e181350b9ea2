from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import (
    Api,
    Database,
    Deployment,
    Functions,
    Layers,
    Observability,
)


class BookingServiceStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        enable_observability: bool = True,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")
        layers = Layers(self, "Layers")

        fns = Functions(
            self,
            "Functions",
            bookings_table=database.bookings_table,
            inventory_table=database.inventory_table,
            common_layer=layers.common_layer,
            policy=self.node.try_get_context("bookingPolicy"),
        )

        deployment = Deployment(
            self,
            "Deployment",
            create_booking=fns.create_booking,
            update_booking=fns.update_booking,
            cancel_booking=fns.cancel_booking,
        )

        api = Api(
            self,
            "Api",
            create_booking=deployment.create_booking_alias,
            list_bookings=fns.list_bookings,
            update_booking=deployment.update_booking_alias,
            cancel_booking=deployment.cancel_booking_alias,
        )

        if enable_observability:
            Observability(
                self,
                "Observability",
                functions=fns.all_functions,
            )

        self.api_url_output = CfnOutput(self, "BookingsApiUrl", value=api.rest_api.url)
        CfnOutput(self, "InventoryTableName", value=database.inventory_table.table_name)
