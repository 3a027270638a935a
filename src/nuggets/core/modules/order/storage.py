"""File storage operations for the order collection."""

import json
import os
import tempfile
from pathlib import Path

from nuggets.core.modules.order.models import Order, OrderCollection


def read_orders_file(orders_path: str) -> list[Order]:
    """Read and validate the full order collection.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON or does not match the schema
            (pydantic's ValidationError is a ValueError)
    """
    raw = Path(orders_path).read_text(encoding="utf-8")
    return OrderCollection.model_validate_json(raw).orders


def write_orders_file(orders_path: str, orders: list[Order]) -> Path:
    """Replace the order file with the given collection.

    The data is written to a temporary file in the same directory and moved
    into place, so readers see either the old or the new collection.
    """
    file_path = Path(orders_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps({"orders": [order.to_file() for order in orders]}, indent=2, ensure_ascii=False)

    fd, tmp_name = tempfile.mkstemp(dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp_file:
            tmp_file.write(payload)
            tmp_file.write("\n")
        Path(tmp_name).replace(file_path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return file_path


def ensure_orders_file(orders_path: str) -> bool:
    """Create the order file with an empty collection if missing. Returns True if created."""
    if Path(orders_path).exists():
        return False
    write_orders_file(orders_path, [])
    return True
