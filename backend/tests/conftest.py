import pytest
from fastapi.testclient import TestClient

from expense_tracker.api.deps import get_rate_client
from expense_tracker.database import close_db, init_db
from expense_tracker.main import app

from tests.helpers import FakeRateService, make_rate_client


@pytest.fixture
def rate_service():
    return FakeRateService()


@pytest.fixture
def database():
    init_db("sqlite://")
    yield
    close_db()


@pytest.fixture
def client(database, rate_service):
    app.dependency_overrides[get_rate_client] = lambda: make_rate_client(rate_service)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def headers():
    return {"X-User-Id": "user-1"}
