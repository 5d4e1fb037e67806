"""
Laundry order endpoints: derived totals, reference checks, filters
"""
from laundrydesk.models import LaundryOrder


def test_end_to_end_order_total(client, make_package, make_customer):
    package = make_package(price=15000)
    customer = make_customer()

    resp = client.post("/api/orders", json={
        "customerId": customer["id"],
        "packageId": package["id"],
        "weight": 2.5,
    })
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Laundry order created successfully"
    order = body["data"]
    assert order["totalAmount"] == 37500
    assert order["status"] == "Pending"
    assert order["paymentStatus"] == "Pending"
    assert order["customer"]["name"] == "John Doe"
    assert order["package"]["name"] == "Basic Wash"
    assert order["paymentMethod"] is None


def test_client_supplied_total_is_ignored(client, make_package, make_customer, make_order):
    order = make_order(make_customer(), make_package(price=10000), weight=3, totalAmount=1)
    assert order["totalAmount"] == 30000


def test_unpriced_package_gives_null_total(client, make_package, make_customer, make_order):
    order = make_order(make_customer(), make_package(price=None))
    assert order["totalAmount"] is None


def test_missing_package_creates_nothing(client, make_customer):
    customer = make_customer()
    resp = client.post("/api/orders", json={
        "customerId": customer["id"],
        "packageId": 999,
        "weight": 1,
    })
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Package not found"}
    assert client.get("/api/orders").json()["count"] == 0


def test_missing_customer_and_payment_method(client, make_package, make_customer):
    package = make_package()
    resp = client.post("/api/orders", json={"customerId": 999, "packageId": package["id"], "weight": 1})
    assert resp.status_code == 404
    assert resp.json()["error"] == "Customer not found"

    customer = make_customer()
    resp = client.post("/api/orders", json={
        "customerId": customer["id"],
        "packageId": package["id"],
        "paymentMethodId": 999,
        "weight": 1,
    })
    assert resp.status_code == 404
    assert resp.json()["error"] == "Payment method not found"


def test_order_validation(client):
    resp = client.post("/api/orders", json={
        "customerId": 0,
        "packageId": "abc",
        "weight": 0,
        "status": "Shipped",
    })
    assert resp.status_code == 400
    fields = {issue["field"] for issue in resp.json()["details"]}
    assert fields == {"customerId", "packageId", "weight", "status"}


def test_notes_only_update_keeps_total(client, make_package, make_customer, make_order):
    package = make_package(price=15000)
    order = make_order(make_customer(), package)
    assert order["totalAmount"] == 37500

    client.put(f"/api/packages/{package['id']}", json={
        "name": "Basic Wash",
        "description": "Standard washing and drying service",
        "price": 20000,
        "active": True,
    })

    resp = client.put(f"/api/orders/{order['id']}", json={
        "customerId": order["customerId"],
        "packageId": order["packageId"],
        "weight": 2.5,
        "status": "Processing",
        "notes": "Extra starch",
    })
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["notes"] == "Extra starch"
    assert data["status"] == "Processing"
    assert data["totalAmount"] == 37500


def test_weight_or_package_change_recomputes_total(client, make_package, make_customer, make_order):
    basic = make_package(price=15000)
    premium = make_package(name="Premium Wash", price=25000)
    order = make_order(make_customer(), basic)

    resp = client.put(f"/api/orders/{order['id']}", json={
        "customerId": order["customerId"],
        "packageId": basic["id"],
        "weight": 4,
    })
    assert resp.json()["data"]["totalAmount"] == 60000

    resp = client.put(f"/api/orders/{order['id']}", json={
        "customerId": order["customerId"],
        "packageId": premium["id"],
        "weight": 4,
    })
    assert resp.json()["data"]["totalAmount"] == 100000
    assert resp.json()["data"]["package"]["name"] == "Premium Wash"


def test_any_status_transition_allowed(client, make_package, make_customer, make_order):
    order = make_order(make_customer(), make_package(), status="Completed", paymentStatus="Paid")
    resp = client.put(f"/api/orders/{order['id']}", json={
        "customerId": order["customerId"],
        "packageId": order["packageId"],
        "weight": 2.5,
        "status": "Pending",
    })
    assert resp.status_code == 200
    assert resp.json()["data"]["status"] == "Pending"
    assert resp.json()["data"]["paymentStatus"] == "Pending"


def test_update_order_errors(client, make_package, make_customer, make_order):
    order = make_order(make_customer(), make_package())
    resp = client.put("/api/orders/abc", json={})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid order ID"

    payload = {"customerId": order["customerId"], "packageId": order["packageId"], "weight": 1}
    assert client.put("/api/orders/999", json=payload).status_code == 404

    payload["packageId"] = 999
    resp = client.put(f"/api/orders/{order['id']}", json=payload)
    assert resp.status_code == 404
    assert client.get(f"/api/orders/{order['id']}").json()["data"]["weight"] == 2.5


def test_list_orders_newest_first_and_status_filter(client, make_package, make_customer, make_order):
    package = make_package()
    customer = make_customer()
    first = make_order(customer, package)
    second = make_order(customer, package, status="Completed")

    body = client.get("/api/orders").json()
    assert body["count"] == 2
    assert [o["id"] for o in body["data"]] == [second["id"], first["id"]]

    completed = client.get("/api/orders", params={"status": "Completed"}).json()
    assert [o["id"] for o in completed["data"]] == [second["id"]]
    assert client.get("/api/orders", params={"status": "all"}).json()["count"] == 2


def test_delete_order(client, make_package, make_customer, make_order):
    order = make_order(make_customer(), make_package())
    resp = client.delete(f"/api/orders/{order['id']}")
    assert resp.status_code == 200
    assert resp.json()["message"] == "Order deleted successfully"
    assert client.get(f"/api/orders/{order['id']}").status_code == 404
    assert client.delete("/api/orders/-1").status_code == 400


def test_dashboard_stats(client, make_package, make_customer, make_order):
    package = make_package(price=15000)
    make_package(name="Old Service", active=False)
    customer = make_customer()
    make_order(customer, package, status="Completed")
    make_order(customer, package, weight=1)

    body = client.get("/api/dashboard/stats").json()
    assert body["success"] is True
    stats = body["data"]
    assert stats["customers"] == 1
    assert stats["packages"] == 2
    assert stats["activePackages"] == 1
    assert stats["orders"] == 2
    assert stats["ordersByStatus"]["Completed"] == 1
    assert stats["ordersByStatus"]["Pending"] == 1
    assert stats["ordersByStatus"]["Cancelled"] == 0
    assert stats["completedRevenue"] == 37500


def test_store_failure_returns_generic_error(client, engine):
    LaundryOrder.__table__.drop(bind=engine)
    resp = client.get("/api/orders")
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Failed to fetch orders"}
    LaundryOrder.__table__.create(bind=engine)


def test_weight_precision_beyond_two_decimals_rejected(client, make_package, make_customer):
    package = make_package(price=15000)
    customer = make_customer()
    for weight in (0.001, 2.555):
        resp = client.post("/api/orders", json={
            "customerId": customer["id"],
            "packageId": package["id"],
            "weight": weight,
        })
        assert resp.status_code == 400
        assert [d["field"] for d in resp.json()["details"]] == ["weight"]
    assert client.get("/api/orders").json()["count"] == 0


def test_stored_weight_matches_total(client, make_package, make_customer, make_order):
    order = make_order(make_customer(), make_package(price=15000), weight=2.56)
    assert order["weight"] == 2.56
    assert order["totalAmount"] == 38400

    resp = client.put(f"/api/orders/{order['id']}", json={
        "customerId": order["customerId"],
        "packageId": order["packageId"],
        "weight": 2.56,
        "notes": "Same weight resubmitted",
    })
    assert resp.json()["data"]["totalAmount"] == 38400


def test_order_ids_outside_integer_range(client):
    resp = client.get("/api/orders/99999999999999999999")
    assert resp.status_code == 404
    assert resp.json()["error"] == "Order not found"
    assert client.get("/api/orders/²").status_code == 400
