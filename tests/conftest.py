"""Shared fixtures: a fresh in-memory database and app per test."""

import pytest
from fastapi.testclient import TestClient

from formbuilder.core.config.settings import Settings
from formbuilder.db.session import Database
from formbuilder.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(
        DATABASE_URL="sqlite+pysqlite:///:memory:",
        LOG_TO_FILE=False,
        LOG_LEVEL="WARNING",
        SEED_DEFAULT_DATA_TYPES=True,
    )


@pytest.fixture
def database(settings):
    db = Database(settings.DATABASE_URL)
    yield db
    db.dispose()


@pytest.fixture
def client(settings, database):
    app = create_app(settings=settings, database=database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_field(client):
    def _make(label: str, data_type_id: int = 1, **extra) -> dict:
        resp = client.post("/fields", json={"label": label, "data_type_id": data_type_id, **extra})
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]
    return _make


@pytest.fixture
def make_form(client):
    def _make(name: str = "Contact", field_ids=(), **extra) -> dict:
        body = {"name": name, "fields": [{"field_id": fid} for fid in field_ids], **extra}
        resp = client.post("/forms", json=body)
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]
    return _make


@pytest.fixture
def make_group(client):
    def _make(name: str) -> dict:
        resp = client.post("/groups", json={"group_name": name})
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]
    return _make
