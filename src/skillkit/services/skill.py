"""Skill request routing."""

import logging
from collections.abc import Callable

from ..exceptions import (
    MalformedRequestError,
    NoHandlerRegisteredError,
    UnknownIntentError,
    UnsupportedRequestTypeError,
)
from ..models.request import AlexaRequestEnvelope, RequestType
from ..models.response import AlexaResponse
from .middleware import Handler

logger = logging.getLogger(__name__)

# The standard intents every skill should handle.
INTENT_NAME_CANCEL = "AMAZON.CancelIntent"
INTENT_NAME_FALLBACK = "AMAZON.FallbackIntent"
INTENT_NAME_HELP = "AMAZON.HelpIntent"
INTENT_NAME_NAVIGATE_HOME = "AMAZON.NavigateHomeIntent"
INTENT_NAME_STOP = "AMAZON.StopIntent"


class Skill:
    """
    Root of a skill: holds the handlers for every request type it expects.

    Register everything before the skill starts taking traffic. Registering
    the same intent twice replaces the earlier handler. Once set up, one
    ``Skill`` can serve concurrent requests; it keeps no per-request state.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._intents: dict[str, Handler] = {}
        self._launch: Handler | None = None
        self._can_fulfill: Handler | None = None

    @property
    def configured(self) -> bool:
        """True once at least one handler has been registered."""
        return bool(self._intents) or self._launch is not None or self._can_fulfill is not None

    @property
    def intent_names(self) -> list[str]:
        return sorted(self._intents)

    def route_intent(self, intent_name: str, handler: Handler) -> None:
        """Handle every IntentRequest for ``intent_name`` with ``handler``."""
        if intent_name in self._intents:
            logger.debug(f"Replacing handler for intent: {intent_name}")
        self._intents[intent_name] = handler

    def intent(self, intent_name: str) -> Callable[[Handler], Handler]:
        """Decorator form of ``route_intent``."""

        def register(handler: Handler) -> Handler:
            self.route_intent(intent_name, handler)
            return handler

        return register

    def launch(self, handler: Handler) -> Handler:
        """Handler for "Alexa, open <skill>"."""
        self._launch = handler
        return handler

    def can_fulfill_intent(self, handler: Handler) -> Handler:
        """
        Handler for the CanFulfillIntentRequest pre-flight check.

        Needed if the skill goes through name-free interaction certification.
        """
        self._can_fulfill = handler
        return handler

    def handle(self, request: AlexaRequestEnvelope) -> AlexaResponse:
        """
        Route the request to its registered handler and return the response.

        Raises:
            MalformedRequestError: IntentRequest without intent data
            UnknownIntentError: no handler for the intent
            NoHandlerRegisteredError: launch/can-fulfill with nothing registered
            UnsupportedRequestTypeError: any other request type
        """
        request_type = request.request.type
        logger.info(f"Alexa request type: {request_type}")

        if request_type == RequestType.INTENT.value:
            return self._handle_intent(request)
        if request_type == RequestType.CAN_FULFILL_INTENT.value:
            return self._delegate(self._can_fulfill, request)
        if request_type == RequestType.LAUNCH.value:
            return self._delegate(self._launch, request)
        raise UnsupportedRequestTypeError(request_type)

    def _handle_intent(self, request: AlexaRequestEnvelope) -> AlexaResponse:
        intent = request.request.intent
        if intent is None:
            raise MalformedRequestError("body is missing intent data for IntentRequest")

        logger.info(f"Alexa intent: {intent.name}")

        handler = self._intents.get(intent.name)
        if handler is None:
            raise UnknownIntentError(intent.name)
        return handler(request)

    def _delegate(self, handler: Handler | None, request: AlexaRequestEnvelope) -> AlexaResponse:
        if handler is None:
            raise NoHandlerRegisteredError(request.request.type)
        return handler(request)
