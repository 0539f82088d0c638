"""Request routing and response building for Alexa skill backends."""

from .exceptions import (
    HandlerFailedError,
    MalformedRequestError,
    NoHandlerRegisteredError,
    SkillError,
    TemplateDefinitionError,
    TemplateEvaluationError,
    UnknownIntentError,
    UnsupportedRequestTypeError,
)
from .models import AlexaRequestEnvelope, AlexaResponse, RequestType, fail, new_response
from .services import Middleware, Skill, Template, compose, with_func, with_translation

__version__ = "0.1.0"

__all__ = [
    "Skill",
    "Middleware",
    "compose",
    "Template",
    "with_func",
    "with_translation",
    "AlexaRequestEnvelope",
    "AlexaResponse",
    "RequestType",
    "new_response",
    "fail",
    "SkillError",
    "MalformedRequestError",
    "UnknownIntentError",
    "NoHandlerRegisteredError",
    "UnsupportedRequestTypeError",
    "TemplateDefinitionError",
    "TemplateEvaluationError",
    "HandlerFailedError",
]
