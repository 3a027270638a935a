from fastapi import APIRouter

from nuggets.core.modules.contact.models import ContactSubmission
from nuggets.web.deps import AppDep
from nuggets.web.openapi import ErrorResponse, OkResponse

router = APIRouter(tags=["contact"])


@router.post(
    "/api/contact",
    summary="Send contact form",
    description="Forward a commission inquiry to the team chat webhook.",
    operation_id="submitContact",
    responses={
        200: {"description": "Delivered"},
        400: {"model": ErrorResponse, "description": "Missing required field"},
        500: {"model": ErrorResponse, "description": "Webhook not configured"},
        502: {"model": ErrorResponse, "description": "Webhook rejected the message"},
    },
)
async def submit_contact(submission: ContactSubmission, app: AppDep) -> OkResponse:
    await app.submit_contact(submission)
    return OkResponse()
