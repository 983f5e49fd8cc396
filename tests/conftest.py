import pytest
from fastapi.testclient import TestClient

from bookstore.books import BookStore
from bookstore.config import Settings
from bookstore.main import create_app


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def app(settings):
    # Fresh app and store per test so mutations never leak between tests
    return create_app(settings=settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store():
    return BookStore()
