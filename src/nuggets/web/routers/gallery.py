from fastapi import APIRouter
from pydantic import BaseModel

from nuggets.core.modules.gallery.models import GalleryItem
from nuggets.web.deps import AppDep

router = APIRouter(tags=["gallery"])


class GalleryResponse(BaseModel):
    ok: bool = True
    items: list[GalleryItem]


@router.get(
    "/api/past-work",
    summary="List past work images",
    description="Images named work-* in the gallery directory, in natural order.",
    operation_id="listPastWork",
)
async def list_past_work(app: AppDep) -> GalleryResponse:
    return GalleryResponse(items=await app.get_gallery())
