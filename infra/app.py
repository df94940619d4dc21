#!/usr/bin/env python3
"""
CDK Application Entry Point

Memo Skill - DynamoDB + Lambda をデプロイ。
Lambda コードは `pip install . -t build/lambda` で作成したディレクトリを使う。
"""
import os
import aws_cdk as cdk
from aws_cdk import aws_lambda as lambda_

from infra.stacks.memo_skill_stack import MemoSkillStack

app = cdk.App()

# 環境設定
env = cdk.Environment(
    account=os.environ.get('CDK_DEFAULT_ACCOUNT'),
    region=os.environ.get('CDK_DEFAULT_REGION', 'us-east-1'),
)

asset_path = app.node.try_get_context('lambda_asset_path') or 'build/lambda'

MemoSkillStack(
    app,
    'MemoSkillStack',
    code=lambda_.Code.from_asset(asset_path),
    skill_id=app.node.try_get_context('skill_id') or os.environ.get('ALEXA_SKILL_ID'),
    env=env,
    description='Memo Skill - voice memos backed by DynamoDB',
)

app.synth()
