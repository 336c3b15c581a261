import pytest

CART_ID = "guest-1718000000000"


async def _add(client, product_id, quantity=1, cart_id=CART_ID):
    return await client.post(
        "/api/cart",
        json={"cartId": cart_id, "productId": product_id, "quantity": quantity},
    )


@pytest.mark.anyio
async def test_add_to_cart_then_merge(client):
    created = await _add(client, 1, 2)
    merged = await _add(client, 1, 3)

    assert created.status_code == 201
    assert created.json() == {"id": 1, "cartId": CART_ID, "productId": 1, "quantity": 2}
    assert merged.status_code == 200
    assert merged.json()["quantity"] == 5


@pytest.mark.anyio
async def test_quantity_defaults_to_one(client):
    resp = await client.post("/api/cart", json={"cartId": CART_ID, "productId": 3})

    assert resp.status_code == 201
    assert resp.json()["quantity"] == 1


@pytest.mark.anyio
async def test_add_to_cart_errors(client):
    missing = await _add(client, 999)
    zero = await _add(client, 1, 0)
    stringly = await _add(client, 1, "2")
    no_cart = await client.post("/api/cart", json={"productId": 1})

    assert missing.status_code == 404
    assert zero.status_code == 400
    assert zero.json()["fields"] == ["quantity"]
    assert stringly.status_code == 400
    assert no_cart.status_code == 400
    assert no_cart.json()["fields"] == ["cartId"]


@pytest.mark.anyio
async def test_add_out_of_stock_product(client, seeded_storage, sample_product):
    product = await seeded_storage.create_product(sample_product.model_copy(update={"in_stock": False}))

    resp = await _add(client, product.id)

    assert resp.status_code == 400
    assert resp.json() == {"message": "Product is out of stock", "code": "OUT_OF_STOCK"}


@pytest.mark.anyio
async def test_get_cart_includes_products(client):
    await _add(client, 15, 1)

    resp = await client.get(f"/api/cart/{CART_ID}")

    assert resp.status_code == 200
    lines = resp.json()
    assert len(lines) == 1
    assert lines[0]["product"]["slug"] == "motolite-mf-4l-bs"
    assert (await client.get("/api/cart/unknown-cart")).json() == []


@pytest.mark.anyio
async def test_cart_summary(client):
    await _add(client, 6, 7)  # 7 x 750

    summary = (await client.get(f"/api/cart/{CART_ID}/summary")).json()

    assert summary["cartId"] == CART_ID
    assert summary["itemCount"] == 7
    assert summary["subtotal"] == 5250.0
    assert summary["shipping"] == 0
    assert summary["tax"] == 367.5
    assert summary["total"] == 5617.5
    assert summary["freeShippingThreshold"] == 4999.0


@pytest.mark.anyio
async def test_update_quantity(client):
    item_id = (await _add(client, 1)).json()["id"]

    ok = await client.put(f"/api/cart/{item_id}", json={"quantity": 4})
    bad = await client.put(f"/api/cart/{item_id}", json={"quantity": 0})
    not_a_number = await client.put(f"/api/cart/{item_id}", json={"quantity": "four"})
    missing = await client.put("/api/cart/999", json={"quantity": 1})

    assert ok.status_code == 200
    assert ok.json()["quantity"] == 4
    assert bad.status_code == 400
    assert not_a_number.status_code == 400
    assert missing.status_code == 404


@pytest.mark.anyio
async def test_remove_item(client):
    item_id = (await _add(client, 1)).json()["id"]

    first = await client.delete(f"/api/cart/{item_id}")
    second = await client.delete(f"/api/cart/{item_id}")

    assert first.status_code == 204
    assert second.status_code == 404


@pytest.mark.anyio
async def test_clear_cart(client):
    await _add(client, 1)
    await _add(client, 2)

    resp = await client.delete(f"/api/cart/clear/{CART_ID}")

    assert resp.status_code == 204
    assert (await client.get(f"/api/cart/{CART_ID}")).json() == []
    # Clearing an empty cart still succeeds
    assert (await client.delete(f"/api/cart/clear/{CART_ID}")).status_code == 204


@pytest.mark.anyio
async def test_bad_path_parameters_report_camel_case_names(client):
    put = await client.put("/api/cart/abc", json={"quantity": 1})
    delete = await client.delete("/api/cart/abc")

    assert put.status_code == 400
    assert put.json()["fields"] == ["itemId"]
    assert delete.json()["fields"] == ["itemId"]


@pytest.mark.anyio
async def test_long_cart_id_round_trips(client):
    cart_id = "guest-" + "x" * 300

    added = await _add(client, 1, cart_id=cart_id)

    assert added.status_code == 201
    assert [line["cartId"] for line in (await client.get(f"/api/cart/{cart_id}")).json()] == [cart_id]
