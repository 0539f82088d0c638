"""Alexa Skill webhook endpoint."""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError

from ..exceptions import SkillError
from ..models.request import AlexaRequestEnvelope

logger = logging.getLogger(__name__)

router = APIRouter(tags=["alexa"])


@router.post("/")
@router.post("/alexa")
async def alexa_webhook(request: Request) -> dict[str, Any]:
    """
    Handle Alexa Skill requests.

    Accepts the same JSON the Alexa service sends to a Lambda function, so a
    skill can be exercised locally with curl before it is deployed. Bodies
    that are not an Alexa request envelope get a 400; requests the skill
    cannot dispatch get a 500 carrying the reason.
    """
    try:
        body = await request.json()
        envelope = AlexaRequestEnvelope.model_validate(body)
    except (ValueError, ValidationError) as e:
        logger.warning(f"Unreadable Alexa request: {e}")
        raise HTTPException(status_code=400, detail=f"Unable to read input [{e}]") from e

    logger.info(f"Alexa request received: {envelope.request.type}")

    skill = request.app.state.skill
    try:
        response = await run_in_threadpool(skill.handle, envelope)
    except SkillError as e:
        logger.error(f"Unable to handle request: {e}")
        raise HTTPException(status_code=500, detail=f"Unable to handle request [{e}]") from e

    return response.to_wire()
