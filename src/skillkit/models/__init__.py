"""Pydantic models for the Alexa request/response wire format."""

from .request import (
    AlexaIntent,
    AlexaRequest,
    AlexaRequestEnvelope,
    AlexaSession,
    AlexaSlot,
    RequestType,
)
from .response import AlexaResponse, AlexaResponseBody, fail, new_response

__all__ = [
    "RequestType",
    "AlexaRequestEnvelope",
    "AlexaRequest",
    "AlexaIntent",
    "AlexaSlot",
    "AlexaSession",
    "AlexaResponse",
    "AlexaResponseBody",
    "new_response",
    "fail",
]
