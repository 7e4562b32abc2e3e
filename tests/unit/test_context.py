import pytest
from botocore.exceptions import ClientError
from pytest_mock import MockerFixture

from blog_api.context import close_context, open_context
from blog_api.repositories.post_repository import PostRepository
from blog_api.settings import Settings


class TestContext:
    def test_successfully_open_context(
        self, posts, settings: Settings, posts_table
    ):
        context = open_context(settings)

        assert isinstance(context.post_repository, PostRepository)
        assert len(posts) == len(context.post_repository.get_all_posts())
        close_context(context)

    def test_fail_to_open_context_due_to_missing_table(
        self, mocker: MockerFixture, settings: Settings, dynamodb_resource
    ):
        close = mocker.patch("botocore.client.BaseClient.close")

        with pytest.raises(ClientError) as excinfo:
            open_context(settings)

        assert "ResourceNotFoundException" == excinfo.value.response["Error"]["Code"]
        close.assert_called_once()

    def test_successfully_create_missing_table(
        self, settings: Settings, dynamodb_resource
    ):
        settings.create_table = True

        context = open_context(settings)

        table_names = [table.name for table in dynamodb_resource.tables.all()]
        assert [settings.posts_table_name] == table_names
        assert [] == context.post_repository.get_all_posts()
        close_context(context)

    def test_successfully_close_context(
        self, mocker: MockerFixture, settings: Settings, posts_table
    ):
        context = open_context(settings)
        close = mocker.patch("botocore.client.BaseClient.close")

        close_context(context)

        close.assert_called_once()


class TestSettings:
    def test_successfully_derive_posts_table_name(self):
        assert "prod-posts" == Settings(stage="prod").posts_table_name

    def test_successfully_read_environment(self, monkeypatch):
        monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
        monkeypatch.setenv("DATABASE_URL", "http://localhost:8000")
        monkeypatch.setenv("PORT", "9000")

        settings = Settings()

        assert "us-east-1" == settings.aws_region
        assert "http://localhost:8000" == settings.database_url
        assert 9000 == settings.port
