import pytest
from fastapi.testclient import TestClient

import laundrydesk.models  # noqa: F401
from laundrydesk.core import Base, create_db_engine, create_session_factory
from laundrydesk.main import create_app


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = create_session_factory(engine)()
    yield session
    session.close()


@pytest.fixture
def app(engine):
    return create_app(engine)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def anyio_backend():
    return "asyncio"


# ========== Record factories ==========

@pytest.fixture
def make_package(client):
    def _make(**overrides):
        payload = {
            "name": "Basic Wash",
            "description": "Standard washing and drying service",
            "price": 15000,
            "active": True,
        }
        payload.update(overrides)
        resp = client.post("/api/packages", json=payload)
        assert resp.status_code == 201, resp.json()
        return resp.json()["data"]
    return _make


@pytest.fixture
def make_customer(client):
    def _make(**overrides):
        payload = {
            "name": "John Doe",
            "email": "john@example.com",
            "phone": "+628123456789",
        }
        payload.update(overrides)
        resp = client.post("/api/customers", json=payload)
        assert resp.status_code == 201, resp.json()
        return resp.json()["data"]
    return _make


@pytest.fixture
def make_payment_method(client):
    def _make(**overrides):
        payload = {"name": "Cash", "description": "Cash payment", "active": True}
        payload.update(overrides)
        resp = client.post("/api/payment-methods", json=payload)
        assert resp.status_code == 201, resp.json()
        return resp.json()["data"]
    return _make


@pytest.fixture
def make_order(client):
    def _make(customer, package, **overrides):
        payload = {"customerId": customer["id"], "packageId": package["id"], "weight": 2.5}
        payload.update(overrides)
        resp = client.post("/api/orders", json=payload)
        assert resp.status_code == 201, resp.json()
        return resp.json()["data"]
    return _make
