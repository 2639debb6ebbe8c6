"""Twilio SMS/MMS webhook.

Twilio posts every inbound message here as a form-encoded body and expects
TwiML back. The handler always answers with an empty ``<Response>`` so the
sender never sees an error; only the status code tells a failure apart.
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from idea_vault.api.database import get_session
from idea_vault.intake.ingestion import InboundMessage, ingest_message

logger = logging.getLogger(__name__)

router = APIRouter(tags=["webhook"])

TWIML_EMPTY_RESPONSE = "<Response></Response>"


def _twiml(status_code: int = status.HTTP_200_OK) -> Response:
    return Response(content=TWIML_EMPTY_RESPONSE, media_type="text/xml", status_code=status_code)


@router.post("/twilio/webhook")
async def twilio_webhook(
    request: Request,
    session: AsyncSession = Depends(get_session),
) -> Response:
    """Ingest one inbound text message.

    Args:
        request: Form-encoded Twilio callback (From, Body, NumMedia, MediaUrlN, ...)
        session: Database session (injected)

    Returns:
        Response: Empty TwiML, 200 on success, 500 if the message could not
        be logged at all
    """
    try:
        form = await request.form()
        message = InboundMessage.from_form(form)
        result = await ingest_message(session, message)
    except Exception as e:
        logger.error(f"Error processing webhook: {e}", exc_info=True)
        return _twiml(status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.info(
        "Webhook event %d processed (stored=%s)",
        result.event_id,
        result.stored,
        extra={"record_type": result.record_type.value},
    )
    return _twiml()
