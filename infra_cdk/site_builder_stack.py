# infra_cdk/site_builder_stack.py
from aws_cdk import (
    Stack,
    Duration,
    CfnParameter,
    aws_iam as iam,
    aws_lambda as _lambda,
    aws_s3 as s3,
    aws_s3_notifications as s3_nots,
    CfnOutput
)
from constructs import Construct


class SiteBuilderStack(Stack):

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # === Parameters for Deployment ===
        site_bucket_param = CfnParameter(self, "SiteBucketName", type="String",
            description="The bucket the gallery website is served from.")

        original_bucket_param = CfnParameter(self, "OriginalBucketName", type="String",
            description="The bucket holding the original pictures under pics/original/.")

        distribution_domain_param = CfnParameter(self, "DistributionDomain", type="String",
            description="Domain name of the CloudFront distribution in front of the site bucket (e.g. d111111abcdef8.cloudfront.net).")

        # Both buckets already exist; the stack only wires the builder to them
        site_bucket = s3.Bucket.from_bucket_name(self, "SiteBucket", site_bucket_param.value_as_string)
        original_bucket = s3.Bucket.from_bucket_name(self, "OriginalBucket", original_bucket_param.value_as_string)

        # === Shared Lambda Layer (pydantic-settings, PyYAML) ===
        common_layer = _lambda.LayerVersion(self, "CommonLayer",
            code=_lambda.Code.from_asset("lambda_layer"),
            compatible_runtimes=[_lambda.Runtime.PYTHON_3_12],
            description="Third-party packages for the site builder"
        )

        # === Site Builder Function ===
        site_builder_function = _lambda.Function(self, "SiteBuilderFunction",
            runtime=_lambda.Runtime.PYTHON_3_12,
            code=_lambda.Code.from_asset("lambdas"),
            handler="site_builder.app.handler",
            environment={
                "SITE_BUCKET": site_bucket_param.value_as_string,
                "ORIGINAL_BUCKET": original_bucket_param.value_as_string,
                "CLOUDFRONT_DISTRIBUTION_DOMAIN": distribution_domain_param.value_as_string,
            },
            layers=[common_layer],
            memory_size=512,
            timeout=Duration.minutes(5),
        )

        original_bucket.grant_read(site_builder_function)
        site_bucket.grant_put(site_builder_function)
        site_builder_function.add_to_role_policy(iam.PolicyStatement(
            actions=["cloudfront:ListDistributions", "cloudfront:CreateInvalidation"],
            resources=["*"],
        ))

        # Rebuild whenever pictures or album metadata change
        for event_type in (s3.EventType.OBJECT_CREATED, s3.EventType.OBJECT_REMOVED):
            original_bucket.add_event_notification(
                event_type,
                s3_nots.LambdaDestination(site_builder_function),
                s3.NotificationKeyFilter(prefix="pics/original/"),
            )

        CfnOutput(self, "SiteBuilderFunctionName", value=site_builder_function.function_name)
