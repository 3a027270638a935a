import asyncio

import structlog

from nuggets.config import Config
from nuggets.core.core import Service
from nuggets.core.modules.order.models import DEFAULT_STATUS, Order, OrderPatch
from nuggets.core.modules.order.storage import ensure_orders_file, read_orders_file, write_orders_file
from nuggets.errors import NotFoundError, StorageError, ValidationError
from nuggets.utils import now

logger = structlog.get_logger(__name__)


class OrderService(Service):
    """Order collection backed by a single JSON file.

    Every call reads the whole file and every mutation rewrites it. Mutations
    are serialized by one lock so concurrent writers never lose each other's
    records; reads take no lock.
    """

    def __init__(self, config: Config) -> None:
        super().__init__(config)
        self._path = config.orders_path
        self._write_lock = asyncio.Lock()

    async def on_start(self) -> None:
        """Create the order file on first run."""
        if await asyncio.to_thread(ensure_orders_file, self._path):
            logger.info("orders_file_created", path=self._path)

    async def list_orders(self) -> list[Order]:
        """Get all orders, newest first. An unreadable file reads as empty."""
        try:
            return await asyncio.to_thread(read_orders_file, self._path)
        except FileNotFoundError:
            logger.warning("orders_file_missing", path=self._path)
            return []
        except (OSError, ValueError) as e:
            logger.warning("orders_file_unreadable", path=self._path, error=str(e))
            return []

    async def create_order(self, client: str, title: str, status: str | None = None) -> Order:
        client = _require_text(client, "client")
        title = _require_text(title, "title")
        order = Order(client=client, title=title, status=(status or "").strip() or DEFAULT_STATUS)

        async with self._write_lock:
            orders = await self._load_for_write()
            orders.insert(0, order)
            await self._save(orders)

        logger.info("order_created", order_id=order.id)
        return order

    async def update_order(self, order_id: str, patch: OrderPatch) -> Order:
        """Apply the fields present in the patch and refresh the timestamp."""
        changes = patch.changes()
        for field in ("client", "title"):
            if field in changes:
                changes[field] = _require_text(changes[field], field)

        async with self._write_lock:
            orders = await self._load_for_write()
            index = _find_index(orders, order_id)
            updated = orders[index].model_copy(update={**changes, "updated_at": now()})
            orders[index] = updated
            await self._save(orders)

        logger.info("order_updated", order_id=order_id, fields=sorted(changes))
        return updated

    async def delete_order(self, order_id: str) -> None:
        """Permanently remove an order."""
        async with self._write_lock:
            orders = await self._load_for_write()
            del orders[_find_index(orders, order_id)]
            await self._save(orders)

        logger.info("order_deleted", order_id=order_id)

    async def _load_for_write(self) -> list[Order]:
        # A missing file starts a fresh collection, a corrupt one must not be overwritten
        try:
            return await asyncio.to_thread(read_orders_file, self._path)
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as e:
            logger.exception("orders_file_unreadable", path=self._path)
            raise StorageError("Order storage is unreadable") from e

    async def _save(self, orders: list[Order]) -> None:
        try:
            await asyncio.to_thread(write_orders_file, self._path, orders)
        except OSError as e:
            logger.exception("orders_file_write_failed", path=self._path)
            raise StorageError("Order storage is unwritable") from e


def _require_text(value: str, field: str) -> str:
    value = value.strip()
    if not value:
        raise ValidationError(f"Field '{field}' must not be empty")
    return value


def _find_index(orders: list[Order], order_id: str) -> int:
    for index, order in enumerate(orders):
        if order.id == order_id:
            return index
    raise NotFoundError(f"Order '{order_id}' not found")
