from fastapi import APIRouter, Response
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, Field

from nuggets.core.modules.session.models import Role
from nuggets.web.deps import ROLE_COOKIE, SESSION_COOKIE, AppDep, AuthTokenDep
from nuggets.web.guard import PORTAL_PAGE
from nuggets.web.openapi import ErrorResponse

router = APIRouter(tags=["auth"])


class LoginRequest(BaseModel):
    """Authentication request."""

    secret: str = Field(..., description="Shared client or admin secret")


class LoginResponse(BaseModel):
    """Authentication response."""

    ok: bool = True
    redirect: str = Field(..., description="Board page to open after login")
    role: Role = Field(..., description="Role granted by the secret")


@router.post(
    "/api/login",
    summary="Log in to the portal",
    description="Exchange a shared secret for a session cookie and the matching board page.",
    operation_id="login",
    responses={
        200: {"description": "Successfully authenticated"},
        401: {"model": ErrorResponse, "description": "Invalid secret"},
    },
)
async def login(login_data: LoginRequest, app: AppDep, response: Response) -> LoginResponse:
    token, role = await app.login(login_data.secret)
    max_age = app.config.session_max_age
    secure = app.config.secure_cookies

    response.set_cookie(
        key=SESSION_COOKIE,
        value=token,
        httponly=True,
        samesite="lax",
        secure=secure,
        max_age=max_age,
    )
    # Readable by page scripts only; the server always derives the role from the session
    response.set_cookie(key=ROLE_COOKIE, value=role.value, samesite="lax", secure=secure, max_age=max_age)

    return LoginResponse(redirect=app.home_page(role), role=role)


@router.get(
    "/api/logout",
    summary="End session",
    description="Revoke the current session and return to the portal page.",
    operation_id="logout",
    response_class=RedirectResponse,
    status_code=303,
    responses={303: {"description": "Redirect to the portal page"}},
)
async def logout(app: AppDep, auth_token: AuthTokenDep) -> RedirectResponse:
    await app.logout(auth_token)
    response = RedirectResponse(PORTAL_PAGE, status_code=303)
    response.delete_cookie(SESSION_COOKIE)
    response.delete_cookie(ROLE_COOKIE)
    return response
