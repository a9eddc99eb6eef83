import pytest
from fastapi.testclient import TestClient
from todos.core.types import TaskSchema
from todos.server.api.app import create_app
from todos.server.config.settings import Settings
from todos.storage.memory import InMemoryStorage


@pytest.fixture()
def settings() -> Settings:
    settings = Settings()
    settings.REQUEST_TIMEOUT = 5.0
    settings.APP_ENVIRONMENT = "test"
    return settings


@pytest.fixture()
def storage() -> InMemoryStorage:
    return InMemoryStorage[TaskSchema]()


@pytest.fixture()
def app(settings, storage):
    return create_app(settings=settings, storage=storage)


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client
