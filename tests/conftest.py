import uuid

import boto3
import pendulum
import pytest
from moto import mock_aws

from blog_api.models.post import Author, BlogPost
from blog_api.repositories.post_repository import PostRepository
from blog_api.services.post_service import PostService
from blog_api.settings import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(debug=False, stage="test", aws_region="eu-central-1")


@pytest.fixture
def dynamodb_resource(settings: Settings):
    with mock_aws():
        yield boto3.Session().resource("dynamodb", region_name=settings.aws_region)


@pytest.fixture
def posts_table(dynamodb_resource, settings: Settings):
    return dynamodb_resource.create_table(
        TableName=settings.posts_table_name,
        AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
        KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
        BillingMode="PAY_PER_REQUEST",
    )


@pytest.fixture
def make_post(faker):
    def make(**overrides) -> BlogPost:
        data = {
            "id": str(uuid.uuid4()),
            "title": faker.sentence(),
            "content": faker.text(),
            "author": Author(
                first_name=faker.first_name(), last_name=faker.last_name()
            ),
            "created": pendulum.now("UTC").to_iso8601_string(),
        }
        data.update(overrides)
        return BlogPost(**data)

    return make


@pytest.fixture
def posts(make_post, posts_table) -> list[BlogPost]:
    posts = [make_post() for _ in range(10)]
    with posts_table.batch_writer() as batch:
        for post in posts:
            batch.put_item(Item=post.model_dump(by_alias=True))
    return posts


@pytest.fixture
def post_repository(posts_table) -> PostRepository:
    return PostRepository(posts_table)


@pytest.fixture
def post_service(post_repository: PostRepository) -> PostService:
    return PostService(post_repository)
