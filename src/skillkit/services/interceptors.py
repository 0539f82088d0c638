"""Stock middleware: request logging and account-link enforcement."""

import json
import logging
import time
from typing import Any

from ..config import settings
from ..models.request import AlexaRequestEnvelope
from ..models.response import AlexaResponse, new_response
from .middleware import Handler, MiddlewareFunc
from .speech import Template

logger = logging.getLogger(__name__)

DEFAULT_ACCOUNT_LINK_SPEECH = (
    "I'm sorry. You must connect your account using the Alexa app in order to use this feature."
)


def _identity(request: AlexaRequestEnvelope) -> dict[str, Any]:
    return {
        "request.id": request.request.request_id,
        "user.id": request.user_id,
        "device.id": request.device_id,
    }


def _format(fields: dict[str, Any]) -> str:
    return " ".join(f"{key}={value}" for key, value in fields.items())


def request_logger(
    log_request_json: bool | None = None,
    log_response_speech: bool | None = None,
) -> MiddlewareFunc:
    """
    Log the start and end of every request the chain handles.

    Each line carries the request, user and device ids; the start line adds
    the intent and resolved slot values, the end line the elapsed time and
    any error. The full request JSON and the response speech can be added,
    but they expose what users said, so leave them off outside dev/staging.
    Unset flags fall back to ``SKILLKIT_LOG_REQUEST_JSON`` and
    ``SKILLKIT_LOG_RESPONSE_SPEECH``.
    """
    include_json = settings.log_request_json if log_request_json is None else log_request_json
    include_speech = settings.log_response_speech if log_response_speech is None else log_response_speech

    def log_request(request: AlexaRequestEnvelope, next_handler: Handler) -> AlexaResponse:
        fields = _identity(request)
        intent = request.request.intent
        if intent is not None:
            fields["intent.name"] = intent.name
            for slot_name in intent.slots:
                fields[f"intent.slot.{slot_name}"] = intent.resolve(slot_name)
        if include_json:
            fields["request.json"] = json.dumps(request.to_wire())
        logger.info(f"Request started {_format(fields)}")

        start = time.perf_counter()
        try:
            response = next_handler(request)
        except Exception as e:
            elapsed = time.perf_counter() - start
            logger.error(f"Request failed {_format(_identity(request))} elapsed={elapsed:.4f}s error={e}")
            raise
        elapsed = time.perf_counter() - start

        fields = _identity(request)
        fields["elapsed"] = f"{elapsed:.4f}s"
        speech = response.response.output_speech
        if include_speech and speech is not None:
            fields["response.speech"] = speech.ssml or speech.text
        logger.info(f"Request complete {_format(fields)}")
        return response

    return log_request


def require_account(template: Template | None = None) -> MiddlewareFunc:
    """
    Only let account-linked users through.

    Requests without a user access token never reach the handler; the user
    hears ``template`` (evaluated with the request as its value) instead.
    """
    speech = template or Template(DEFAULT_ACCOUNT_LINK_SPEECH)

    def check_access_token(request: AlexaRequestEnvelope, next_handler: Handler) -> AlexaResponse:
        if request.user_access_token:
            return next_handler(request)

        logger.info(f"Missing user access token {_format(_identity(request))}")
        return new_response(request).speak_template(speech, request).ok()

    return check_access_token
