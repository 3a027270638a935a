"""Tests for order models."""

from datetime import UTC, datetime

from nuggets.core.modules.order.models import Order, OrderPatch, generate_order_id


class TestGenerateOrderId:
    def test_contains_epoch_millis(self):
        at = datetime(2025, 1, 2, 3, 4, 5, tzinfo=UTC)
        assert generate_order_id(at).startswith(f"order-{int(at.timestamp() * 1000)}-")

    def test_ids_unique_for_same_instant(self):
        at = datetime(2025, 1, 2, tzinfo=UTC)
        assert len({generate_order_id(at) for _ in range(50)}) == 50


class TestOrderSerialization:
    def test_file_keys(self):
        order = Order(id="order-1", client="Alice", title="Badge", updated_at=datetime(2025, 1, 2, tzinfo=UTC))
        assert order.to_file() == {
            "id": "order-1",
            "client": "Alice",
            "title": "Badge",
            "status": "Queued",
            "updatedAt": "2025-01-02T00:00:00Z",
        }

    def test_reads_camel_case(self):
        order = Order.model_validate(
            {"id": "order-1", "client": "A", "title": "B", "status": "Done", "updatedAt": "2025-01-02T00:00:00Z"}
        )
        assert order.updated_at == datetime(2025, 1, 2, tzinfo=UTC)


class TestOrderPatch:
    def test_only_set_fields(self):
        assert OrderPatch(status="Done").changes() == {"status": "Done"}

    def test_timestamp_excluded(self):
        patch = OrderPatch.model_validate({"title": "New", "updatedAt": "2025-01-02T00:00:00Z"})
        assert patch.changes() == {"title": "New"}

    def test_explicit_null_ignored(self):
        assert OrderPatch.model_validate({"client": None, "status": "Done"}).changes() == {"status": "Done"}
