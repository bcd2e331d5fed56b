import pytest
from watertrack.models import Device, Usage

MISSING_ID = 999999


def _seed(client, headers, prefix):
    category = client.post("/api/categories", json={"name": f"{prefix} Kitchen"}, headers=headers).json()
    device = client.post("/api/devices", json={"name": f"{prefix} Sink", "categoryId": category["id"]}, headers=headers).json()
    usage = client.post("/api/usages", json={"deviceId": device["id"], "value": 12.5}, headers=headers).json()
    bill = client.post(
        "/api/bills",
        json={"amount": 40, "dueDate": "2024-05-01T00:00:00", "waterUsed": 3000},
        headers=headers,
    ).json()
    return {"categories": category["id"], "devices": device["id"], "usages": usage["id"], "bills": bill["id"]}


UPDATES = {
    "categories": {"name": "Stolen"},
    "devices": {"name": "Stolen"},
    "usages": {"value": 1},
    "bills": {"amount": 1},
}


@pytest.mark.parametrize("resource", ["categories", "devices", "usages", "bills"])
def test_foreign_rows_look_missing(client, alice, bob, resource):
    _, alice_headers = alice
    _, bob_headers = bob
    bob_ids = _seed(client, bob_headers, "Bob")
    foreign = f"/api/{resource}/{bob_ids[resource]}"
    missing = f"/api/{resource}/{MISSING_ID}"

    for method, kwargs in [("get", {}), ("patch", {"json": UPDATES[resource]}), ("delete", {})]:
        foreign_res = getattr(client, method)(foreign, headers=alice_headers, **kwargs)
        missing_res = getattr(client, method)(missing, headers=alice_headers, **kwargs)

        assert foreign_res.status_code == missing_res.status_code == 404
        assert foreign_res.json() == missing_res.json()

    # Bob's row survived Alice's attempts untouched
    res = client.get(foreign, headers=bob_headers)
    assert res.status_code == 200


def test_lists_only_show_own_rows(client, alice, bob):
    _, alice_headers = alice
    _, bob_headers = bob
    alice_ids = _seed(client, alice_headers, "Alice")
    _seed(client, bob_headers, "Bob")

    assert [c["id"] for c in client.get("/api/categories", headers=alice_headers).json()] == [alice_ids["categories"]]
    assert [d["id"] for d in client.get("/api/devices", headers=alice_headers).json()] == [alice_ids["devices"]]
    assert [u["id"] for u in client.get("/api/usages", headers=alice_headers).json()] == [alice_ids["usages"]]
    assert [b["id"] for b in client.get("/api/bills", headers=alice_headers).json()["bills"]] == [alice_ids["bills"]]


def test_device_with_foreign_category_is_rejected(client, db, alice, bob):
    _, alice_headers = alice
    _, bob_headers = bob
    bob_category = client.post("/api/categories", json={"name": "Bob Garden"}, headers=bob_headers).json()

    res = client.post("/api/devices", json={"name": "Hose", "categoryId": bob_category["id"]}, headers=alice_headers)

    assert res.status_code == 404
    assert res.json() == {"message": "Category not found"}
    assert db.query(Device).count() == 0


def test_device_cannot_move_into_foreign_category(client, alice, bob):
    _, alice_headers = alice
    _, bob_headers = bob
    alice_ids = _seed(client, alice_headers, "Alice")
    bob_category = client.post("/api/categories", json={"name": "Bob Garden"}, headers=bob_headers).json()

    res = client.patch(f"/api/devices/{alice_ids['devices']}", json={"categoryId": bob_category["id"]}, headers=alice_headers)

    assert res.status_code == 404
    device = client.get(f"/api/devices/{alice_ids['devices']}", headers=alice_headers).json()
    assert device["categoryId"] == alice_ids["categories"]


def test_usage_with_foreign_device_is_rejected(client, db, alice, bob):
    _, alice_headers = alice
    _, bob_headers = bob
    bob_ids = _seed(client, bob_headers, "Bob")

    res = client.post("/api/usages", json={"deviceId": bob_ids["devices"], "value": 3}, headers=alice_headers)

    assert res.status_code == 404
    assert db.query(Usage).count() == 1  # only Bob's


def test_usages_for_foreign_device(client, alice, bob):
    _, alice_headers = alice
    _, bob_headers = bob
    bob_ids = _seed(client, bob_headers, "Bob")

    assert client.get(f"/api/usages/device/{bob_ids['devices']}", headers=alice_headers).status_code == 404
    own = client.get(f"/api/usages/device/{bob_ids['devices']}", headers=bob_headers)
    assert [u["id"] for u in own.json()] == [bob_ids["usages"]]
