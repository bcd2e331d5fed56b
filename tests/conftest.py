import os
import tempfile
from cryptography.fernet import Fernet

# Point the app at throwaway storage before anything reads the config
_tmp_dir = tempfile.mkdtemp(prefix="watertrack-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_tmp_dir, 'test.db')}"
os.environ["UPLOAD_DIR"] = os.path.join(_tmp_dir, "uploads")
os.environ["FERNET_KEY"] = Fernet.generate_key().decode()

import pytest
from fastapi.testclient import TestClient
from watertrack.db import Base, engine, sessionlocal
from watertrack.main import app


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    session = sessionlocal()
    yield session
    session.close()


@pytest.fixture
def register(client):
    """Register a user and return (user_id, auth headers)."""
    def _register(email="alice@example.com", name="Alice", password="secret123"):
        res = client.post("/api/users/register", json={"name": name, "email": email, "password": password})
        assert res.status_code == 201, res.text
        body = res.json()
        return body["id"], {"Authorization": f"Bearer {body['token']}"}
    return _register


@pytest.fixture
def alice(register):
    return register("alice@example.com", "Alice")


@pytest.fixture
def bob(register):
    return register("bob@example.com", "Bob")
