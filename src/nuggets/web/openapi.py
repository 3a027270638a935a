from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, Field

from nuggets.web.deps import SESSION_COOKIE


def set_custom_openapi(app: FastAPI) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title="Nuggets Customs API",
            version="0.1.0",
            summary="Contact form, gallery and commission order tracking",
            routes=app.routes,
        )

        openapi_schema.setdefault("components", {})["securitySchemes"] = {
            "SessionCookie": {
                "type": "apiKey",
                "in": "cookie",
                "name": SESSION_COOKIE,
                "description": "Session token set by /api/login",
            },
        }

        # Only the order endpoints need a session
        for path, path_item in openapi_schema["paths"].items():
            if not path.startswith("/api/orders"):
                continue
            for operation in path_item.values():
                operation["security"] = [{"SessionCookie": []}]

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]


class ErrorResponse(BaseModel):
    """Standard failure envelope."""

    ok: bool = Field(False, description="Always false for failures")
    error: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error type")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"ok": False, "error": "Unauthorized", "type": "authentication_error"},
                {"ok": False, "error": "Order 'order-1' not found", "type": "not_found"},
                {"ok": False, "error": "Field 'client' must not be empty", "type": "validation_error"},
            ]
        }
    }


class OkResponse(BaseModel):
    """Success envelope without payload."""

    ok: bool = Field(True, description="Always true for successes")
