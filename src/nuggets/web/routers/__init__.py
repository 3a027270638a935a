from nuggets.web.routers.auth import router as auth_router
from nuggets.web.routers.contact import router as contact_router
from nuggets.web.routers.gallery import router as gallery_router
from nuggets.web.routers.orders import router as orders_router
from nuggets.web.routers.pages import router as pages_router

__all__ = [
    "auth_router",
    "contact_router",
    "gallery_router",
    "orders_router",
    "pages_router",
]
