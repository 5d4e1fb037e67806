"""
Payment method endpoints
"""


def test_second_cash_method_conflicts(client, make_payment_method):
    make_payment_method()
    resp = client.post("/api/payment-methods", json={
        "name": "Cash",
        "description": "Cash on delivery",
        "active": True,
    })
    assert resp.status_code == 409
    assert resp.json()["error"] == "Payment method with this name already exists"

    methods = client.get("/api/payment-methods").json()["data"]
    assert [m["name"] for m in methods].count("Cash") == 1
    assert methods[0]["description"] == "Cash payment"


def test_payment_method_validation(client):
    resp = client.post("/api/payment-methods", json={"name": "QR", "description": "QR"})
    assert resp.status_code == 400
    assert {d["field"] for d in resp.json()["details"]} == {"name", "description"}


def test_update_payment_method(client, make_payment_method):
    method = make_payment_method()
    resp = client.put(f"/api/payment-methods/{method['id']}", json={
        "name": "Cash",
        "description": "Cash at the counter",
        "active": False,
    })
    assert resp.status_code == 200
    assert resp.json()["data"]["active"] is False
    assert resp.json()["message"] == "Payment method updated successfully"


def test_rename_payment_method_to_taken_name(client, make_payment_method):
    make_payment_method()
    card = make_payment_method(name="Credit Card", description="Credit card payment")
    resp = client.put(f"/api/payment-methods/{card['id']}", json={
        "name": "Cash",
        "description": "Credit card payment",
        "active": True,
    })
    assert resp.status_code == 409


def test_payment_method_ids(client):
    resp = client.get("/api/payment-methods/cash")
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid payment method ID"
    resp = client.get("/api/payment-methods/77")
    assert resp.status_code == 404
    assert resp.json()["error"] == "Payment method not found"


def test_delete_payment_method_guard(client, make_payment_method, make_customer, make_package, make_order):
    method = make_payment_method()
    order = make_order(make_customer(), make_package(), paymentMethodId=method["id"])

    resp = client.delete(f"/api/payment-methods/{method['id']}")
    assert resp.status_code == 400
    assert client.get(f"/api/orders/{order['id']}").json()["data"]["paymentMethodId"] == method["id"]

    client.delete(f"/api/orders/{order['id']}")
    resp = client.delete(f"/api/payment-methods/{method['id']}")
    assert resp.status_code == 200
    assert client.get("/api/payment-methods").json()["count"] == 0


def test_payment_method_detail_lists_orders(client, make_payment_method, make_customer, make_package, make_order):
    method = make_payment_method()
    make_order(make_customer(), make_package(), paymentMethodId=method["id"])
    data = client.get(f"/api/payment-methods/{method['id']}").json()["data"]
    assert len(data["orders"]) == 1
    assert data["orders"][0]["customer"]["name"] == "John Doe"
