from __future__ import annotations

import uuid

from fastapi.testclient import TestClient

from evstore.app import app
from evstore.orders.store import clear_orders

ORDER = {
    "vehicleId": "modelY",
    "vehicleName": "Model Y Long Range",
    "totalPrice": 52490,
    "config": {"battery": "Long Range", "paint": "Ultra Red", "wheels": "20-inch"},
    "paymentDetails": {"last4": "4242", "brand": "visa"},
}


def _signed_in_client() -> TestClient:
    c = TestClient(app)
    email = f"buyer-{uuid.uuid4().hex[:8]}@example.com"
    c.post("/auth/signup", json={"name": "Buyer", "email": email, "password": "secret123"})
    return c


def test_place_order():
    clear_orders()
    c = _signed_in_client()
    resp = c.post("/orders", json=ORDER)
    assert resp.status_code == 201
    order = resp.json()["order"]
    assert order["status"] == "Paid"
    assert order["orderNumber"].startswith("EVS-")
    assert order["vehicleName"] == "Model Y Long Range"
    assert order["config"]["paint"] == "Ultra Red"
    assert order["config"]["interior"] is None


def test_list_orders_newest_first():
    clear_orders()
    c = _signed_in_client()
    c.post("/orders", json=ORDER)
    c.post("/orders", json=dict(ORDER, vehicleId="cybertruck", vehicleName="Cybertruck Cyberbeast"))

    resp = c.get("/orders")
    assert resp.status_code == 200
    body = resp.json()
    assert body["count"] == 2
    assert [o["vehicleId"] for o in body["orders"]] == ["cybertruck", "modelY"]
    assert body["orders"][0]["orderNumber"] != body["orders"][1]["orderNumber"]


def test_orders_are_private():
    clear_orders()
    _signed_in_client().post("/orders", json=ORDER)
    body = _signed_in_client().get("/orders").json()
    assert body["count"] == 0
    assert body["orders"] == []


def test_order_requires_vehicle_and_price():
    c = _signed_in_client()
    assert c.post("/orders", json={"vehicleId": "model3", "totalPrice": 40000}).status_code == 422
    assert c.post("/orders", json=dict(ORDER, totalPrice=0)).status_code == 422


def test_order_rejects_bad_card_digits():
    c = _signed_in_client()
    resp = c.post("/orders", json=dict(ORDER, paymentDetails={"last4": "42"}))
    assert resp.status_code == 422
