"""
Client services against the in-process app
"""
import httpx
import pytest

from laundrydesk.clients import (
    ApiClient, CustomerClient, LaundryOrderClient, PackageClient,
    PaymentMethodClient, PerfumeClient, ServiceResult,
)

pytestmark = pytest.mark.anyio

BASE_URL = "http://testserver/api"


@pytest.fixture
def api(app):
    return ApiClient(base_url=BASE_URL, transport=httpx.ASGITransport(app=app))


async def test_order_workflow_through_clients(api):
    packages = PackageClient(api)
    customers = CustomerClient(api)
    orders = LaundryOrderClient(api)

    package = await packages.create({
        "name": "Basic Wash",
        "description": "Standard washing and drying service",
        "price": 15000,
    })
    assert package.success
    assert package.message == "Package created successfully"

    customer = await customers.create({
        "name": "John Doe",
        "email": "john@example.com",
        "phone": "+628123456789",
    })
    assert customer.success

    order = await orders.create({
        "customerId": customer.data["id"],
        "packageId": package.data["id"],
        "weight": 2.5,
    })
    assert order.success
    assert order.data["totalAmount"] == 37500

    listing = await orders.get_all()
    assert listing.success
    assert listing.count == 1

    pending = await orders.get_all(status="Completed")
    assert pending.count == 0


async def test_server_rejection_is_normalized(api):
    methods = PaymentMethodClient(api)
    first = await methods.create({"name": "Cash", "description": "Cash payment"})
    assert first.success

    second = await methods.create({"name": "Cash", "description": "Cash payment"})
    assert second == ServiceResult(success=False, error="Payment method with this name already exists")


async def test_not_found_and_delete(api):
    perfumes = PerfumeClient(api)
    missing = await perfumes.get_by_id(404)
    assert not missing.success
    assert missing.error == "Perfume not found"

    created = await perfumes.create({"name": "Lavender"})
    deleted = await perfumes.delete(created.data["id"])
    assert deleted.success
    assert deleted.message == "Perfume deleted successfully"


async def test_update_and_active_filter(api):
    packages = PackageClient(api)
    created = await packages.create({
        "name": "Express Service",
        "description": "Same-day express laundry service",
        "price": 35000,
    })
    updated = await packages.update(created.data["id"], {
        "name": "Express Service",
        "description": "Same-day express laundry service",
        "price": 35000,
        "active": False,
    })
    assert updated.success
    assert updated.data["active"] is False

    active = await packages.get_active()
    assert active.success
    assert active.data == []


async def test_client_side_validation_sends_nothing():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(201, json={"success": True, "data": {}})

    api = ApiClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))
    result = await CustomerClient(api).create({"name": "J", "email": "nope", "phone": "1"})

    assert not result.success
    assert result.error == "Validation failed"
    assert {d["field"] for d in result.details} == {"name", "email", "phone"}
    assert calls == []


async def test_network_failure_is_normalized():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    api = ApiClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))
    result = await PerfumeClient(api).get_all()

    assert result.success is False
    assert result.error == "Network error: unable to reach the server"


async def test_non_json_response_is_normalized():
    def handler(request):
        return httpx.Response(502, text="<html>Bad Gateway</html>")

    api = ApiClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))
    result = await PackageClient(api).get_all()

    assert result.success is False
    assert "502" in result.error
