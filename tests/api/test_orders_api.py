"""Tests for the order endpoints."""

from datetime import datetime
from pathlib import Path

from tests.conftest import ADMIN_SECRET, CLIENT_SECRET, login


def create(client, /, **body):
    return client.post("/api/orders", json={"client": "Alice", "title": "Custom badge", **body})


class TestAccess:
    def test_anonymous_cannot_list(self, client):
        response = client.get("/api/orders")
        assert response.status_code == 401
        assert response.json() == {"ok": False, "error": "Unauthorized", "type": "authentication_error"}

    def test_client_reads_but_cannot_write(self, client):
        login(client, CLIENT_SECRET)
        assert client.get("/api/orders").json() == {"ok": True, "orders": []}

        response = create(client)
        assert response.status_code == 401
        assert response.json()["error"] == "Admin session required"
        assert client.get("/api/orders").json()["orders"] == []

    def test_client_cannot_update_or_delete(self, client):
        login(client, ADMIN_SECRET)
        order_id = create(client).json()["order"]["id"]
        login(client, CLIENT_SECRET)

        assert client.patch(f"/api/orders/{order_id}", json={"status": "Done"}).status_code == 401
        assert client.delete(f"/api/orders/{order_id}").status_code == 401
        assert client.get("/api/orders").json()["orders"][0]["status"] == "Queued"

    def test_admin_reads_and_writes(self, client):
        login(client, ADMIN_SECRET)
        assert create(client).status_code == 201
        assert len(client.get("/api/orders").json()["orders"]) == 1


class TestCrud:
    def test_create_then_update(self, client):
        login(client, ADMIN_SECRET)
        created = create(client).json()
        assert created["ok"] is True
        order = created["order"]
        assert order["status"] == "Queued"
        assert set(order) == {"id", "client", "title", "status", "updatedAt"}

        response = client.patch(f"/api/orders/{order['id']}", json={"status": "Shipped"})
        assert response.status_code == 200
        updated = response.json()["order"]
        assert updated["status"] == "Shipped"
        assert datetime.fromisoformat(updated["updatedAt"]) >= datetime.fromisoformat(order["updatedAt"])
        assert (updated["client"], updated["title"]) == ("Alice", "Custom badge")

    def test_newest_first(self, client):
        login(client, ADMIN_SECRET)
        first = create(client, client="Alice").json()["order"]["id"]
        second = create(client, client="Bob").json()["order"]["id"]
        ids = [o["id"] for o in client.get("/api/orders").json()["orders"]]
        assert ids == [second, first]

    def test_create_validation(self, client):
        login(client, ADMIN_SECRET)
        response = client.post("/api/orders", json={"client": "  ", "title": "Badge"})
        assert response.status_code == 400
        assert response.json()["type"] == "validation_error"

        response = client.post("/api/orders", json={"client": "Alice"})
        assert response.status_code == 400
        assert client.get("/api/orders").json()["orders"] == []

    def test_update_unknown(self, client):
        login(client, ADMIN_SECRET)
        response = client.patch("/api/orders/order-missing", json={"status": "Done"})
        assert response.status_code == 404
        assert response.json()["type"] == "not_found"

    def test_delete_twice(self, client):
        login(client, ADMIN_SECRET)
        order_id = create(client).json()["order"]["id"]
        assert client.delete(f"/api/orders/{order_id}").json() == {"ok": True}
        response = client.delete(f"/api/orders/{order_id}")
        assert response.status_code == 404
        assert response.json()["ok"] is False

    def test_corrupt_storage(self, client, config):
        login(client, ADMIN_SECRET)
        Path(config.orders_path).write_text("{not json", encoding="utf-8")

        assert client.get("/api/orders").json() == {"ok": True, "orders": []}
        response = create(client)
        assert response.status_code == 500
        assert response.json()["type"] == "storage_error"
