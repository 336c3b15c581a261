import pytest

from motoparts.core.config import settings
from motoparts.core.rate_limit import limiter


@pytest.fixture
def strict_limits(monkeypatch):
    """Turn the limiter on with tiny windows; counters start and end empty."""
    monkeypatch.setattr(limiter, "enabled", True)
    monkeypatch.setattr(settings, "RATE_LIMIT_DEFAULT", "3/minute")
    monkeypatch.setattr(settings, "RATE_LIMIT_CHECKOUT", "1/minute")
    limiter.reset()
    yield
    limiter.reset()


@pytest.mark.anyio
async def test_default_limit_applies_to_catalog_routes(client, strict_limits):
    statuses = [(await client.get("/api/categories")).status_code for _ in range(3)]
    blocked = await client.get("/api/categories")

    assert statuses == [200, 200, 200]
    assert blocked.status_code == 429
    assert blocked.headers["Retry-After"] == "60"
    assert blocked.json()["code"] == "RATE_LIMITED"


@pytest.mark.anyio
async def test_default_limit_applies_to_cart_routes(client, strict_limits):
    for _ in range(3):
        assert (await client.get("/api/cart/guest-1")).status_code == 200

    assert (await client.get("/api/cart/guest-1")).status_code == 429


@pytest.mark.anyio
async def test_checkout_has_its_own_stricter_limit(client, strict_limits):
    payload = {
        "order": {
            "email": "rider@example.com",
            "total": 110.0,
            "shippingAddress": "12 Rizal St",
            "billingAddress": "12 Rizal St",
        },
        "items": [{"productId": 1, "quantity": 1, "price": 110.0}],
    }

    first = await client.post("/api/orders", json=payload)
    second = await client.post("/api/orders", json=payload)

    assert first.status_code == 201
    assert second.status_code == 429
    assert second.headers["Retry-After"] == "60"
    # Other routes keep their own counters
    assert (await client.get("/api/products/featured")).status_code == 200
