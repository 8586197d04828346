import os

# Settings are read at import time, so the environment goes first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-signing-key-with-enough-length-for-hs256"
os.environ["JWT_ISSUER"] = "sales-api-tests"
os.environ["JWT_AUDIENCE"] = "sales-api-test-clients"
os.environ["ADMIN_PASSWORD"] = "Admin@test123"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from sales_api.config.database import Base, SessionLocal, engine
from sales_api.config.settings import settings
from sales_api.main import app


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db(reset_database):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(reset_database):
    # Entering the context runs the lifespan, which seeds the admin account
    with TestClient(app) as test_client:
        yield test_client


def login(client, username, password):
    response = client.post("/api/users/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["data"]["access_token"]


@pytest.fixture
def admin_headers(client):
    token = login(client, settings.admin_username, settings.admin_password)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(client):
    response = client.post(
        "/api/users/register",
        json={"username": "rep.viewer", "email": "viewer@example.com", "password": "viewer-pass-1"},
    )
    assert response.status_code == 201, response.text
    token = login(client, "rep.viewer", "viewer-pass-1")
    return {"Authorization": f"Bearer {token}"}
