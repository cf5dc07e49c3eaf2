"""Pytest fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from pipeforge.api.dependencies import cleanup
from pipeforge.api.main import create_app


@pytest.fixture
def client():
    """Create a test client with a fresh workspace store."""
    cleanup()
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client
    cleanup()


@pytest.fixture
def template_payload(client):
    return client.get("/pipelines/template").json()


@pytest.fixture
def workspace_id(client):
    response = client.post("/workspaces")
    assert response.status_code == 201
    return response.json()["id"]
