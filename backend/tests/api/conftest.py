"""
Fixtures for API tests.

Each test gets a fresh app over in-memory storage and no email notifier.
"""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer
from tests.conftest import make_settings


@pytest.fixture
def container() -> ServiceContainer:
    return ServiceContainer(make_settings())


@pytest.fixture
def app(container):
    """Create a fresh app for each test."""
    return create_app(container=container)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def signed_up(client) -> dict:
    """Sign up John Doe and return the response body."""
    response = client.post(
        "/api/users/signup",
        json={"name": "John Doe", "email": "john@x.com", "password": "StrongP@1"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(client, signed_up) -> dict[str, str]:
    """Authorization headers for John Doe."""
    response = client.post(
        "/api/users/signin",
        json={"email": "john@x.com", "password": "StrongP@1"},
    )
    return {"Authorization": f"Bearer {response.json()['token']}"}
