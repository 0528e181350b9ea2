#!/usr/bin/env python3

import aws_cdk as cdk

from booking_service_stack import BookingServiceStack
from pipeline_stack import PipelineStack

app = cdk.App()
BookingServiceStack(
    app,
    "BookingServiceStack",
)

PipelineStack(app, "PipelineStack")

app.synth()
