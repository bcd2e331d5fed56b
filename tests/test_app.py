import pytest
from fastapi.testclient import TestClient
from watertrack.db import Base
from watertrack.main import app


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_startup_aborts_when_schema_cannot_be_created(monkeypatch):
    def unreachable(*args, **kwargs):
        raise RuntimeError("database unreachable")

    monkeypatch.setattr(Base.metadata, "create_all", unreachable)

    with pytest.raises(RuntimeError, match="database unreachable"):
        with TestClient(app):
            pass
