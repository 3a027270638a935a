"""Page guard that runs before routing and static file serving."""

import posixpath
from collections.abc import Awaitable, Callable
from typing import cast

from fastapi import Request
from fastapi.responses import RedirectResponse, Response

from nuggets.app import App
from nuggets.core.modules.session.models import AuthToken, Role
from nuggets.web.deps import SESSION_COOKIE

PORTAL_PAGE = "/portal"

# Both the clean route and the raw static file must be covered
PROTECTED_PAGES: dict[str, frozenset[Role]] = {
    "/client-board": frozenset({Role.CLIENT, Role.ADMIN}),
    "/client-board.html": frozenset({Role.CLIENT, Role.ADMIN}),
    "/admin-board": frozenset({Role.ADMIN}),
    "/admin-board.html": frozenset({Role.ADMIN}),
}


def required_roles(path: str) -> frozenset[Role] | None:
    # Static serving ignores empty and dot segments, so "//admin-board.html" must match too
    normalized = posixpath.normpath("/" + path.lstrip("/"))
    return PROTECTED_PAGES.get(normalized.lower())


async def protect_pages(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """Redirect to the portal when a protected page is requested without the right session."""
    allowed = required_roles(request.url.path)
    if allowed is None:
        return await call_next(request)

    app = cast(App, request.app.state.app)
    token = request.cookies.get(SESSION_COOKIE)
    role = app.resolve_role(AuthToken(token) if token else None)
    if role not in allowed:
        return RedirectResponse(PORTAL_PAGE, status_code=303)
    return await call_next(request)
