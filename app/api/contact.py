import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.api.deps import get_channel_config
from app.output.channels import ChannelConfig
from app.output.router import dispatch
from app.schemas.contact import ContactResponse, ContactSubmission

router = APIRouter(prefix="/api", tags=["contact"])
logger = structlog.get_logger()


@router.post("/contact", response_model=ContactResponse)
async def contact_endpoint(
    request: Request,
    channels: ChannelConfig = Depends(get_channel_config),
):
    """Relay a contact-form submission to every configured channel."""
    try:
        payload = await request.json()
        submission = ContactSubmission.model_validate(payload)
        result = await dispatch(submission, channels)
    except Exception as e:
        logger.exception("contact.error")
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Server error occurred.", "error": str(e)},
        )

    if result.overall_success:
        body = ContactResponse(
            success=True,
            message="Notification sent (one or more channels succeeded).",
            detail=result.detail,
        )
    else:
        body = ContactResponse(
            success=False,
            message="Failed to send via any configured channel.",
            detail=result.detail,
            errors=result.errors or None,
        )

    logger.info("contact.dispatched", status=result.status_code, detail=result.detail)
    return JSONResponse(
        status_code=result.status_code,
        content=body.model_dump(exclude_none=True),
    )
