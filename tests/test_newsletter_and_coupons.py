from datetime import datetime, timezone


def test_subscribe(client, store):
    response = client.post("/subscribe", json={"email": "Reader@Example.com"})

    assert response.status_code == 201
    assert response.json() == {"message": "Subscribed successfully"}
    assert [s["email"] for s in store.subscribers] == ["reader@example.com"]


def test_duplicate_subscribe_is_conflict_and_keeps_one_record(client, store):
    client.post("/subscribe", json={"email": "reader@example.com"})

    response = client.post("/subscribe", json={"email": "READER@example.com"})

    assert response.status_code == 409
    assert response.json() == {"error": "Email is already subscribed"}
    assert [s["email"] for s in store.subscribers] == ["reader@example.com"]


def test_subscribe_requires_email(client, store):
    response = client.post("/subscribe", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "Email is required"}
    assert store.subscribers == []


def test_subscribe_rejects_invalid_email(client, store):
    malformed = (
        "reader",
        "reader@",
        "@example.com",
        "reader@example",
        "a b@example.com",
        "a@b@example.com",
        "<x>@example.com",
    )
    for email in malformed:
        response = client.post("/subscribe", json={"email": email})
        assert response.status_code == 400
    assert store.subscribers == []


def test_coupons_listing(client, store):
    store.coupons = [
        {
            "id": 1,
            "code": "WELCOME10",
            "description": "10% off your first order",
            "discount_percent": 10,
            "valid_until": datetime(2030, 1, 1, tzinfo=timezone.utc),
            "is_active": True,
        },
        {"id": 2, "code": "OLD5", "description": "retired", "discount_percent": 5, "is_active": False},
    ]

    response = client.get("/coupons")

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 1
    assert body["coupons"][0]["code"] == "WELCOME10"


def test_coupons_listing_needs_no_token(client):
    response = client.get("/coupons")

    assert response.status_code == 200
    assert response.json() == {"coupons": [], "count": 0}
