import mongomock
import pytest
from fastapi.testclient import TestClient

from schoolapp.core.config import Settings
from schoolapp.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        jwt_secret_key="test-secret",
        mongodb_db="school_test",
        upload_dir=str(tmp_path / "uploads"),
        log_level="DEBUG",
    )


@pytest.fixture
def app(settings):
    return create_app(settings, mongomock.MongoClient())


@pytest.fixture
def db(app):
    return app.state.db


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


def signup_user(client: TestClient, email: str = "a@b.com", password: str = "pw123", **fields):
    data = {"name": "Alice", "email": email, "password": password}
    data.update(fields)
    return client.post("/api/signup", data=data)


def login_user(client: TestClient, email: str = "a@b.com", password: str = "pw123"):
    return client.post("/api/login", json={"email": email, "password": password})


@pytest.fixture
def auth_headers(client):
    signup_user(client)
    token = login_user(client).json()["token"]
    return {"Authorization": token}
