import pytest
from fastapi.testclient import TestClient

from doctors_api.app.core.config import Settings
from doctors_api.app.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(database_url=str(tmp_path / "doctors.db"))


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # Entering the client runs the lifespan, which opens the database.
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def ada(client):
    response = client.post(
        "/api/doctors",
        json={"name": "Ada", "city": "Boston", "specialty": "Cardiology"},
    )
    assert response.status_code == 201
    return response.json()["data"]["doctor"]
