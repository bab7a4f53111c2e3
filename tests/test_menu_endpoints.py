import logging
import math

import pytest
from fastapi.testclient import TestClient

from menu_catalog_api.app.core.config import Settings
from menu_catalog_api.app.main import create_app
from menu_catalog_api.app.services.menu_service import CatalogStore


def test_list_menu(client):
    resp = client.get("/api/menu")
    assert resp.status_code == 200
    body = resp.json()
    assert [item["id"] for item in body] == [1, 2, 3, 4, 5, 6]
    assert body[0]["name"] == "Classic Burger"


def test_get_item(client):
    resp = client.get("/api/menu/4")
    assert resp.status_code == 200
    assert resp.json()["category"] == "dessert"


def test_get_missing_item(client):
    resp = client.get("/api/menu/999")
    assert resp.status_code == 404
    assert resp.json() == {"error": "item not found"}


def test_non_integer_id_is_rejected(client):
    assert client.get("/api/menu/abc").status_code == 422


def test_list_categories(client):
    resp = client.get("/api/menu/categories")
    assert resp.status_code == 200
    assert resp.json() == ["appetizer", "entree", "dessert", "beverage"]


def test_create_taco(client, taco):
    resp = client.post("/api/menu", json=taco)
    assert resp.status_code == 201
    body = resp.json()
    assert body == dict(taco, id=7, available=True)

    listed = client.get("/api/menu").json()
    assert listed[-1] == body


def test_create_rejected_with_all_errors(client, store):
    resp = client.post("/api/menu", json={"name": "ab", "price": -3, "category": "desert"})
    assert resp.status_code == 200
    fields = [e["field"] for e in resp.json()["errors"]]
    assert fields == ["name", "description", "price", "category", "ingredients"]
    assert len(store) == 6


def test_create_rejects_invalid_json(client, store):
    resp = client.post("/api/menu", content=b"{not json", headers={"Content-Type": "application/json"})
    assert resp.json() == {"errors": [{"field": "body", "message": "Request body must be valid JSON."}]}
    assert len(store) == 6


def test_create_rejects_empty_body(client):
    resp = client.post("/api/menu")
    assert resp.json()["errors"][0]["field"] == "body"


def test_validation_status_is_configurable(taco):
    app = create_app(Settings(validation_error_status=400), store=CatalogStore())
    client = TestClient(app)

    resp = client.post("/api/menu", json=dict(taco, price=0))
    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "price"


def test_api_prefix_is_configurable(taco):
    app = create_app(Settings(api_prefix=""), store=CatalogStore())
    client = TestClient(app)

    assert client.post("/menu", json=taco).status_code == 201
    assert client.get("/menu/1").json()["name"] == "Taco"


def test_update_partial(client):
    resp = client.put("/api/menu/3", json={"price": 9.49, "available": False})
    assert resp.status_code == 200
    body = resp.json()
    assert body["price"] == 9.49
    assert body["available"] is False
    assert body["name"] == "Mozzarella Sticks"


def test_update_negative_price_is_rejected(client):
    resp = client.put("/api/menu/3", json={"price": -1})
    assert resp.status_code == 200
    assert resp.json()["errors"][0]["field"] == "price"
    assert client.get("/api/menu/3").json()["price"] == 8.99


def test_update_unknown_field(client):
    resp = client.put("/api/menu/3", json={"bogusField": 1})
    assert resp.json() == {"errors": [{"field": "bogusField", "message": "Invalid field: bogusField"}]}


def test_update_missing_item_wins_over_validation(client):
    resp = client.put("/api/menu/999", json={"bogusField": 1})
    assert resp.status_code == 404
    assert resp.json() == {"error": "item not found"}


def test_empty_update_keeps_item(client):
    before = client.get("/api/menu/5").json()
    resp = client.put("/api/menu/5", json={})
    assert resp.json() == before


def test_delete_item(client):
    resp = client.delete("/api/menu/2")
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Menu Item Removed"
    assert body["item"]["name"] == "Chicken Caesar Salad"

    assert client.get("/api/menu/2").status_code == 404
    assert client.delete("/api/menu/2").status_code == 404


def test_delete_missing_item(client, store):
    resp = client.delete("/api/menu/999")
    assert resp.status_code == 404
    assert resp.json() == {"error": "item not found"}
    assert len(store) == 6


def test_id_not_reused_after_delete(client, taco):
    client.delete("/api/menu/6")
    resp = client.post("/api/menu", json=taco)
    assert resp.json()["id"] == 7


def test_requests_are_logged(client, taco, caplog):
    caplog.set_level(logging.INFO, logger="menu_catalog_api.requests")

    client.get("/api/menu/1")
    client.post("/api/menu", json=taco)

    messages = [r.getMessage() for r in caplog.records if r.name == "menu_catalog_api.requests"]
    assert "GET /api/menu/1" in messages
    assert "POST /api/menu" in messages
    assert any(m.startswith("Request body: ") and '"Taco"' in m for m in messages)


def test_request_bodies_can_be_hidden(taco, caplog):
    caplog.set_level(logging.INFO, logger="menu_catalog_api.requests")
    client = TestClient(create_app(Settings(log_request_bodies=False), store=CatalogStore()))

    client.post("/api/menu", json=taco)

    messages = [r.getMessage() for r in caplog.records if r.name == "menu_catalog_api.requests"]
    assert messages == ["POST /api/menu"]


def test_create_oversized_price_is_rejected(client, store, taco):
    resp = client.post("/api/menu", json=dict(taco, price=10**400))
    assert resp.status_code == 200
    assert resp.json() == {"errors": [{"field": "price", "message": "Price must be a number greater than 0."}]}
    assert len(store) == 6


def test_create_rejects_non_object_body(client):
    resp = client.post("/api/menu", json=["Taco"])
    assert resp.json() == {"errors": [{"field": "body", "message": "Request body must be a JSON object."}]}


def test_create_string_price_is_not_coerced(client, taco):
    resp = client.post("/api/menu", json=dict(taco, price="5.5"))
    assert [e["field"] for e in resp.json()["errors"]] == ["price"]


@pytest.mark.parametrize("price", [0, -1, "9.5", True, None, 10**400])
def test_update_bad_price_is_rejected(client, price):
    resp = client.put("/api/menu/3", json={"price": price})
    assert resp.status_code == 200
    assert [e["field"] for e in resp.json()["errors"]] == ["price"]
    assert client.get("/api/menu/3").json()["price"] == 8.99


def test_update_nan_price_is_rejected(client):
    resp = client.put(
        "/api/menu/3",
        content=b'{"price": NaN}',
        headers={"Content-Type": "application/json"},
    )
    assert [e["field"] for e in resp.json()["errors"]] == ["price"]
    assert not math.isnan(client.get("/api/menu/3").json()["price"])


def test_update_null_name_is_rejected(client):
    resp = client.put("/api/menu/3", json={"name": None})
    assert resp.json()["errors"][0]["field"] == "name"
    assert client.get("/api/menu/3").json()["name"] == "Mozzarella Sticks"


def test_update_bad_path_id_keeps_default_422(client):
    resp = client.put("/api/menu/abc", json={"price": 1})
    assert resp.status_code == 422
    assert "detail" in resp.json()


def test_menu_routes_are_documented(client):
    schema = client.get("/openapi.json").json()
    for path, operations in schema["paths"].items():
        for method, operation in operations.items():
            assert operation.get("description"), f"{method.upper()} {path} has no description"
