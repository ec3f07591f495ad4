#!/usr/bin/env python3
"""
CDK App for the greeting function
"""
import aws_cdk as cdk
from greeting_function_stack import GreetingFunctionStack

app = cdk.App()

GreetingFunctionStack(
    app,
    "GreetingFunctionStack",
    description="Lambda function answering POST requests with a greeting"
)

app.synth()
