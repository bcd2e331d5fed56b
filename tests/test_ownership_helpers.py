import pytest
from fastapi import HTTPException
from watertrack.models import Bill
from watertrack.services.ownership import owned_query, get_owned_or_404, apply_changes


def test_owned_query_scopes_by_user(client, db, alice, bob):
    alice_id, alice_headers = alice
    bob_id, bob_headers = bob
    client.post("/api/bills", json={"amount": 1, "dueDate": "2024-01-01", "waterUsed": 1}, headers=alice_headers)
    client.post("/api/bills", json={"amount": 2, "dueDate": "2024-01-01", "waterUsed": 1}, headers=bob_headers)

    assert [b.amount for b in owned_query(db, Bill, alice_id)] == [1]
    assert [b.amount for b in owned_query(db, Bill, bob_id)] == [2]


def test_get_owned_or_404_is_uniform(client, db, alice, bob):
    alice_id, _ = alice
    _, bob_headers = bob
    bob_bill = client.post("/api/bills", json={"amount": 2, "dueDate": "2024-01-01", "waterUsed": 1}, headers=bob_headers).json()

    with pytest.raises(HTTPException) as foreign:
        get_owned_or_404(db, Bill, bob_bill["id"], alice_id)
    with pytest.raises(HTTPException) as missing:
        get_owned_or_404(db, Bill, 12345, alice_id)

    assert foreign.value.status_code == missing.value.status_code == 404
    assert foreign.value.detail == missing.value.detail == "Bill not found"


def test_apply_changes():
    bill = Bill(amount=1, water_used=2, photo_url="/uploads/a.jpg")

    apply_changes(bill, {"amount": 5, "photo_url": None}, required=("amount",))
    assert bill.amount == 5
    assert bill.photo_url is None
    assert bill.water_used == 2

    with pytest.raises(HTTPException):
        apply_changes(bill, {"amount": None}, required=("amount",))
