"""Process-wide resources shared by every request.

The context is opened once by the application lifespan and handed to the
route handlers through a dependency, so nothing below is a module-level
singleton.
"""
from dataclasses import dataclass

import boto3
from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError

from blog_api.repositories.post_repository import PostRepository
from blog_api.settings import Settings

RESOURCE_NOT_FOUND = "ResourceNotFoundException"

logger = Logger(utc=True)


@dataclass
class AppContext:
    dynamodb: object
    post_repository: PostRepository


def _create_posts_table(dynamodb, table_name: str):
    logger.info(f"Creating missing table {table_name=}")
    table = dynamodb.create_table(
        TableName=table_name,
        AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
        KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
        BillingMode="PAY_PER_REQUEST",
    )
    table.wait_until_exists()
    return table


def open_context(settings: Settings) -> AppContext:
    """Connect to the store and make sure the posts table is reachable.

    Any failure closes the client again before the error propagates.
    """
    dynamodb = boto3.Session().resource(
        "dynamodb",
        region_name=settings.aws_region,
        endpoint_url=settings.database_url,
    )
    try:
        table = dynamodb.Table(settings.posts_table_name)
        try:
            table.load()
        except ClientError as exc:
            missing = exc.response["Error"]["Code"] == RESOURCE_NOT_FOUND
            if not (missing and settings.create_table):
                raise
            table = _create_posts_table(dynamodb, settings.posts_table_name)
    except Exception:
        logger.exception(f"Failed to open the store {settings.posts_table_name=}")
        dynamodb.meta.client.close()
        raise
    logger.info(f"Connected to table {settings.posts_table_name=}")
    return AppContext(dynamodb=dynamodb, post_repository=PostRepository(table))


def close_context(context: AppContext):
    logger.info("Closing store connection")
    context.dynamodb.meta.client.close()
