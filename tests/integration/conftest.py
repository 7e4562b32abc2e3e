import pytest
from fastapi.testclient import TestClient

from blog_api.http_handler import create_app
from blog_api.settings import Settings


@pytest.fixture
def test_client(settings: Settings, posts_table) -> TestClient:
    with TestClient(create_app(settings), raise_server_exceptions=False) as client:
        yield client
