"""Errors raised while dispatching requests and rendering speech."""


class SkillError(Exception):
    """Base class for every error this package raises."""


class MalformedRequestError(SkillError):
    """The request violates the shape its type promises (e.g. an IntentRequest with no intent)."""


class UnknownIntentError(SkillError):
    """No handler is registered for the requested intent."""

    def __init__(self, intent_name: str) -> None:
        self.intent_name = intent_name
        super().__init__(f"no handler registered for intent: {intent_name}")


class NoHandlerRegisteredError(SkillError):
    """A launch or can-fulfill request arrived but nobody registered a handler for it."""

    def __init__(self, request_type: str) -> None:
        self.request_type = request_type
        super().__init__(f"no handler registered for {request_type}")


class UnsupportedRequestTypeError(SkillError):
    """The request type is not one the router dispatches."""

    def __init__(self, request_type: str) -> None:
        self.request_type = request_type
        super().__init__(f"unsupported request type: {request_type}")


class TemplateDefinitionError(SkillError):
    """A speech template could not be compiled when it was constructed."""


class TemplateEvaluationError(SkillError):
    """A speech template failed while rendering."""


class HandlerFailedError(SkillError):
    """A handler gave up on a request it cannot answer at all."""
