"""Shared test fixtures."""
import os

os.environ["TESTING"] = "1"

import mongomock
import pytest
from fastapi.testclient import TestClient

from doctors_portal.main import app
from doctors_portal.core import database
from doctors_portal.core.config import settings
from doctors_portal.core.security import create_access_token


@pytest.fixture
def client(monkeypatch):
    """App client backed by an in-memory MongoDB."""
    monkeypatch.setattr(database, "MongoClient", mongomock.MongoClient)
    with TestClient(app, base_url="http://testserver") as test_client:
        yield test_client
        app.state.db.client.drop_database(settings.get_database_name)


@pytest.fixture
def db(client):
    return app.state.db


@pytest.fixture
def auth_headers():
    """Build an Authorization header for `email`."""
    def _headers(email: str) -> dict:
        return {"Authorization": f"Bearer {create_access_token(email)}"}
    return _headers


@pytest.fixture
def admin_email(db):
    email = "admin@example.com"
    db.users.insert_one({"email": email, "name": "Admin", "role": "admin"})
    return email


@pytest.fixture
def patient_email(db):
    email = "patient@example.com"
    db.users.insert_one({"email": email, "name": "Patient"})
    return email
