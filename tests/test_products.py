import pytest

from app.db.models import Product


def _product_payload(store_id, **overrides):
    payload = {"name": "T-Shirt", "price": 19.99, "imageUrl": "https://img/shirt.png", "storeId": store_id}
    payload.update(overrides)
    return payload


def test_create_product(client, alice, alice_store):
    response = client.post("/api/products", json=_product_payload(alice_store["id"]), headers=alice)

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "T-Shirt"
    assert body["price"] == 19.99
    assert body["imageUrl"] == "https://img/shirt.png"
    assert body["storeId"] == alice_store["id"]


def test_create_product_in_someone_elses_store_is_forbidden(client, db_session, alice, bob_store):
    response = client.post("/api/products", json=_product_payload(bob_store["id"]), headers=alice)

    assert response.status_code == 403
    assert db_session.query(Product).count() == 0


def test_create_product_in_missing_store_is_forbidden(client, alice):
    response = client.post("/api/products", json=_product_payload(9999), headers=alice)
    assert response.status_code == 403


def test_create_product_requires_name_and_price(client, alice, alice_store):
    response = client.post("/api/products", json={"storeId": alice_store["id"]}, headers=alice)
    assert response.status_code == 400


def test_delete_product(client, db_session, alice, alice_store):
    product = client.post("/api/products", json=_product_payload(alice_store["id"]), headers=alice).json()

    response = client.delete(f"/api/products/{product['id']}", headers=alice)

    assert response.status_code == 204
    assert response.content == b""
    assert db_session.query(Product).count() == 0


def test_delete_missing_product_is_not_found(client, alice):
    response = client.delete("/api/products/12345", headers=alice)
    assert response.status_code == 404


def test_delete_product_owned_by_another_user_is_forbidden(client, db_session, alice, bob, bob_store):
    product = client.post("/api/products", json=_product_payload(bob_store["id"]), headers=bob).json()

    response = client.delete(f"/api/products/{product['id']}", headers=alice)

    assert response.status_code == 403
    assert db_session.query(Product).count() == 1


@pytest.mark.parametrize("product_id", ["abc", "12x", "-1", "99999999999999999999999"])
def test_delete_product_with_non_numeric_id_is_not_found(client, alice, product_id):
    response = client.delete(f"/api/products/{product_id}", headers=alice)
    assert response.status_code == 404
