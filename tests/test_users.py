import time
from watertrack.utils.crypto import get_fernet


def test_register_returns_token(client):
    res = client.post("/api/users/register", json={"name": "Alice", "email": "Alice@Example.com", "password": "secret123"})

    assert res.status_code == 201
    body = res.json()
    assert body["email"] == "alice@example.com"
    assert body["name"] == "Alice"
    assert body["token"]
    assert "password_hash" not in body


def test_register_duplicate_email(client, alice):
    res = client.post("/api/users/register", json={"name": "Other", "email": "alice@example.com", "password": "secret123"})

    assert res.status_code == 400
    assert res.json()["message"] == "Email already registered"


def test_register_validation_details(client):
    res = client.post("/api/users/register", json={"name": "Alice", "email": "not-an-email", "password": "123"})

    assert res.status_code == 400
    body = res.json()
    assert body["message"] == "Validation failed"
    fields = {d["field"] for d in body["details"]}
    assert {"email", "password"} <= fields


def test_login(client, alice):
    res = client.post("/api/users/login", json={"email": "alice@example.com", "password": "secret123"})

    assert res.status_code == 200
    token = res.json()["token"]
    profile = client.get("/api/users/profile", headers={"Authorization": f"Bearer {token}"})
    assert profile.json()["email"] == "alice@example.com"


def test_login_failures_look_the_same(client, alice):
    wrong_password = client.post("/api/users/login", json={"email": "alice@example.com", "password": "nope-nope"})
    unknown_email = client.post("/api/users/login", json={"email": "nobody@example.com", "password": "secret123"})

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"message": "Invalid credentials"}


def test_protected_routes_reject_bad_tokens(client, alice):
    expired = get_fernet().encrypt_at_time(str(alice[0]).encode(), int(time.time()) - 2 * 86400).decode()

    for headers in [
        {},
        {"Authorization": "garbage"},
        {"Authorization": "Token abc"},
        {"Authorization": "Bearer not-a-real-token"},
        {"Authorization": f"Bearer {expired}"},
    ]:
        res = client.get("/api/categories", headers=headers)
        assert res.status_code == 401
        assert res.json() == {"message": "Not authorized"}


def test_token_for_unknown_user_rejected(client):
    token = get_fernet().encrypt(b"4242").decode()

    res = client.get("/api/users/profile", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401


def test_update_profile(client, alice, bob):
    _, headers = alice

    res = client.patch("/api/users/profile", json={"name": "Alice B"}, headers=headers)
    assert res.status_code == 200
    assert res.json()["name"] == "Alice B"
    assert res.json()["email"] == "alice@example.com"

    taken = client.patch("/api/users/profile", json={"email": "bob@example.com"}, headers=headers)
    assert taken.status_code == 400


def test_register_rejects_password_longer_than_bcrypt_accepts(client):
    too_long = client.post("/api/users/register", json={"name": "Alice", "email": "alice@example.com", "password": "p" * 80})

    assert too_long.status_code == 400
    assert [d["field"] for d in too_long.json()["details"]] == ["password"]

    # 72 bytes of multi-byte characters is fewer than 72 characters
    wide = client.post("/api/users/register", json={"name": "Alice", "email": "alice@example.com", "password": "é" * 40})
    assert wide.status_code == 400

    at_limit = client.post("/api/users/register", json={"name": "Alice", "email": "alice@example.com", "password": "p" * 72})
    assert at_limit.status_code == 201


def test_register_race_on_same_email(client, monkeypatch):
    from watertrack.db import sessionlocal
    from watertrack.models import User
    from watertrack.services import user_service

    real_hash = user_service.hash_password

    def hash_after_competitor_registers(password):
        # Another request inserts the same email between the check and the commit
        other = sessionlocal()
        other.add(User(name="Racer", email="alice@example.com", password_hash=real_hash("secret123")))
        other.commit()
        other.close()
        return real_hash(password)

    monkeypatch.setattr(user_service, "hash_password", hash_after_competitor_registers)

    res = client.post("/api/users/register", json={"name": "Alice", "email": "alice@example.com", "password": "secret123"})

    assert res.status_code == 400
    assert res.json() == {"message": "Email already registered"}
