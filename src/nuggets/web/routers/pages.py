"""HTML page routes. Board pages are guarded by the page middleware before reaching here."""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

from nuggets.app import App
from nuggets.errors import NotFoundError
from nuggets.web.deps import AppDep

router = APIRouter(tags=["pages"], include_in_schema=False)


def _page(app: App, name: str) -> FileResponse:
    path = Path(app.config.site_path) / f"{name}.html"
    if not path.is_file():
        raise NotFoundError(f"Page '{name}' not found")
    return FileResponse(path, media_type="text/html")


@router.get("/")
async def index(app: AppDep) -> FileResponse:
    return _page(app, "index")


@router.get("/about")
async def about(app: AppDep) -> FileResponse:
    return _page(app, "about")


@router.get("/clients")
async def clients(app: AppDep) -> FileResponse:
    return _page(app, "clients")


@router.get("/past-work")
async def past_work(app: AppDep) -> FileResponse:
    return _page(app, "past-work")


@router.get("/past-work/{item_id}")
async def past_work_item(item_id: str, app: AppDep) -> FileResponse:  # noqa: ARG001
    # The page script highlights the item, the id is not checked here
    return _page(app, "past-work")


@router.get("/contact")
async def contact(app: AppDep) -> FileResponse:
    return _page(app, "contact")


@router.get("/portal")
async def portal(app: AppDep) -> FileResponse:
    return _page(app, "portal")


@router.get("/client-board")
async def client_board(app: AppDep) -> FileResponse:
    return _page(app, "client-board")


@router.get("/admin-board")
async def admin_board(app: AppDep) -> FileResponse:
    return _page(app, "admin-board")
