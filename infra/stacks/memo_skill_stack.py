"""
Memo Skill Stack (Serverless)

- Attributes Table (DynamoDB On-Demand, ユーザーごとの Attribute Bag)
- Skill Function (Lambda, Alexa Skills Kit トリガー)
"""
from aws_cdk import (
    Stack,
    CfnOutput,
    Duration,
    RemovalPolicy,
    aws_dynamodb as dynamodb,
    aws_iam as iam,
    aws_lambda as lambda_,
    aws_logs as logs,
)
from constructs import Construct


class MemoSkillStack(Stack):
    """メモスキルのテーブルと Lambda を管理するスタック。"""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        code: lambda_.Code,
        skill_id: str | None = None,
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # =================================================================
        # DynamoDB Table
        # =================================================================

        self.attributes_table = dynamodb.Table(
            self, 'Attributes',
            partition_key=dynamodb.Attribute(
                name='id',
                type=dynamodb.AttributeType.STRING
            ),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            point_in_time_recovery=True,
            encryption=dynamodb.TableEncryption.AWS_MANAGED,
            removal_policy=RemovalPolicy.RETAIN,
        )

        # =================================================================
        # Skill Lambda
        # =================================================================

        self.skill_fn = lambda_.Function(
            self, 'SkillFn',
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler='src.handlers.skill.handler.lambda_handler',
            code=code,
            memory_size=256,
            timeout=Duration.seconds(10),
            environment={
                'MEMO_ENVIRONMENT': 'production',
                'DYNAMODB_TABLE_MEMOS': self.attributes_table.table_name,
            },
            log_retention=logs.RetentionDays.ONE_WEEK,
        )

        self.attributes_table.grant_read_write_data(self.skill_fn)

        # Alexa Skills Kit からの呼び出しを許可
        self.skill_fn.add_permission(
            'AlexaSkillsKitInvoke',
            principal=iam.ServicePrincipal('alexa-appkit.amazon.com'),
            action='lambda:InvokeFunction',
            event_source_token=skill_id,
        )

        # Outputs
        CfnOutput(self, 'SkillFunctionArn', value=self.skill_fn.function_arn)
        CfnOutput(self, 'AttributesTableName', value=self.attributes_table.table_name)
