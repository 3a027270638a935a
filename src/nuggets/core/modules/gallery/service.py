import asyncio
import re
from pathlib import Path

import structlog

from nuggets.core.core import Service
from nuggets.core.modules.gallery.models import GalleryItem
from nuggets.utils import natural_sort_key

logger = structlog.get_logger(__name__)

WORK_IMAGE_RE = re.compile(r"^work-.+\.(png|jpg|jpeg|webp|gif)$", re.IGNORECASE)
IMAGES_URL_PREFIX = "/images"


def scan_work_images(images_path: str) -> list[GalleryItem]:
    """List work-* images in a directory in natural order."""
    directory = Path(images_path)
    if not directory.is_dir():
        return []
    names = [entry.name for entry in directory.iterdir() if entry.is_file() and WORK_IMAGE_RE.match(entry.name)]
    names.sort(key=natural_sort_key)
    return [GalleryItem(file=name, url=f"{IMAGES_URL_PREFIX}/{name}", id=Path(name).stem) for name in names]


class GalleryService(Service):
    async def list_items(self) -> list[GalleryItem]:
        try:
            return await asyncio.to_thread(scan_work_images, self.config.images_path)
        except OSError as e:
            logger.warning("gallery_scan_failed", path=self.config.images_path, error=str(e))
            return []
