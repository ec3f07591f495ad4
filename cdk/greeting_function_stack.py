"""
CDK Stack for the greeting function
"""
from aws_cdk import (
    CfnOutput,
    Duration,
    Stack,
    aws_apigateway as apigateway,
    aws_iam as iam,
    aws_lambda as _lambda,
    aws_logs as logs,
)
from constructs import Construct


class GreetingFunctionStack(Stack):
    """Deploys the greeting Lambda function behind an API Gateway REST API"""

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.execution_role = self._create_execution_role()
        self.greeting_function = self._create_greeting_function()
        self.api = self._create_api()

        CfnOutput(
            self, "GreetingFunctionName",
            value=self.greeting_function.function_name,
            description="Greeting Lambda function name"
        )

        CfnOutput(
            self, "SmokeTestCommand",
            value=f"python smoke_test.py --function {self.greeting_function.function_name}",
            description="Command to run the smoke test against the deployed function"
        )

    def _create_execution_role(self) -> iam.Role:
        """Create the execution role; the function only needs to write logs"""
        return iam.Role(
            self,
            "GreetingExecutionRole",
            assumed_by=iam.ServicePrincipal("lambda.amazonaws.com"),
            description="Execution role for the greeting function",
            managed_policies=[
                iam.ManagedPolicy.from_aws_managed_policy_name("service-role/AWSLambdaBasicExecutionRole")
            ],
        )

    def _create_greeting_function(self) -> _lambda.Function:
        """Create the Lambda function from the function/ directory"""
        log_level = self.node.try_get_context("log_level") or "INFO"

        return _lambda.Function(
            self,
            "GreetingFunction",
            runtime=_lambda.Runtime.PYTHON_3_12,
            handler="greeting.handler.lambda_handler",
            code=_lambda.Code.from_asset("function"),
            role=self.execution_role,
            timeout=Duration.seconds(10),
            memory_size=128,
            environment={
                "GREETING_LOG_LEVEL": log_level,
            },
            log_retention=logs.RetentionDays.ONE_WEEK,
        )

    def _create_api(self) -> apigateway.LambdaRestApi:
        """Expose the function as POST / through a proxy integration"""
        api = apigateway.LambdaRestApi(
            self,
            "GreetingApi",
            handler=self.greeting_function,
            proxy=False,
            description="Greeting endpoint",
        )
        api.root.add_method("POST")

        return api
