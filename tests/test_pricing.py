"""Tests for the pricing catalog and service orders."""

from bridge.services.pricing_service import get_pricing_tier, get_pricing_tiers


def test_catalog():
    tiers = get_pricing_tiers()
    assert [(t.id, t.price) for t in tiers] == [("basic", 2900), ("detailed", 7900), ("premium", 19900)]
    assert all(t.currency == "usd" for t in tiers)
    assert get_pricing_tier("premium").features[0] == "Everything in Detailed Analysis"
    assert get_pricing_tier("gold") is None


def test_pricing_route(client):
    response = client.get("/api/pricing")

    assert response.status_code == 200
    body = response.json()
    assert [t["name"] for t in body] == ["Basic Match", "Detailed Analysis", "Premium Support"]
    assert len(body[1]["features"]) == 6


def test_create_order(client):
    response = client.post("/api/pricing/orders", json={"user_id": "user-1", "tier_id": "detailed"})

    assert response.status_code == 201
    body = response.json()
    assert body["service_type"] == "detailed_analysis"
    assert body["price"] == 7900
    assert body["status"] == "pending"
    assert body["payment_id"] is None


def test_create_order_unknown_tier_or_user(client):
    response = client.post("/api/pricing/orders", json={"user_id": "user-1", "tier_id": "gold"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Pricing tier not found"

    response = client.post("/api/pricing/orders", json={"user_id": "nobody", "tier_id": "basic"})
    assert response.status_code == 404
    assert response.json()["detail"] == "User profile not found"


def test_order_lifecycle(client):
    order = client.post("/api/pricing/orders", json={"user_id": "user-1", "tier_id": "basic"}).json()

    response = client.put(
        f"/api/pricing/orders/{order['id']}/status",
        json={"status": "completed", "payment_id": "pi_42"},
    )
    assert response.status_code == 200
    assert response.json()["status"] == "completed"
    assert response.json()["payment_id"] == "pi_42"

    orders = client.get("/api/pricing/orders/user-1").json()
    assert [o["id"] for o in orders] == [order["id"]]
    assert orders[0]["status"] == "completed"


def test_order_status_validation(client):
    order = client.post("/api/pricing/orders", json={"user_id": "user-1", "tier_id": "basic"}).json()
    response = client.put(f"/api/pricing/orders/{order['id']}/status", json={"status": "refunded"})
    assert response.status_code == 422


def test_update_missing_order(client):
    response = client.put("/api/pricing/orders/nope/status", json={"status": "failed"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Service order not found"
