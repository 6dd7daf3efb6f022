from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from orderpush.app import build_services, create_app
from orderpush.config import Settings
from orderpush.notifications.channel.fake_expo import FakeExpoGateway
from orderpush.notifications.channel.fake_fcm import FakeFcmGateway
from orderpush.store.fake_store import InMemoryStore


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)


@pytest.fixture
def settings():
    return Settings(environment="test", _env_file=None)


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def expo():
    return FakeExpoGateway()


@pytest.fixture
def fcm():
    return FakeFcmGateway()


@pytest.fixture
def services(settings, store, expo, fcm):
    return build_services(settings, store, expo, fcm)


@pytest.fixture
def client(settings, services):
    app = create_app(settings=settings, services=services)
    return TestClient(app, raise_server_exceptions=False)
