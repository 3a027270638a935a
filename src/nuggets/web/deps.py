from typing import Annotated, cast

from fastapi import Depends, Request
from fastapi.security import APIKeyCookie

from nuggets.app import App
from nuggets.core.modules.session.models import AuthToken

SESSION_COOKIE = "session"
ROLE_COOKIE = "role"

cookie_scheme = APIKeyCookie(name=SESSION_COOKIE, auto_error=False)


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_auth_token(token_cookie: Annotated[str | None, Depends(cookie_scheme)] = None) -> AuthToken | None:
    """Session token from the cookie. Validation happens in the access service per operation."""
    if token_cookie:
        return AuthToken(token_cookie)
    return None


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
AuthTokenDep = Annotated[AuthToken | None, Depends(get_auth_token)]
