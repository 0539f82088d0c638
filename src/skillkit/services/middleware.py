"""Middleware chains that run before an intent/request handler."""

from collections.abc import Callable, Iterable

from ..models.request import AlexaRequestEnvelope
from ..models.response import AlexaResponse

# A handler takes the incoming request and returns the response Alexa should act on.
Handler = Callable[[AlexaRequestEnvelope], AlexaResponse]

# Middleware gets the request plus the next handler in the chain. Not calling
# ``next_handler`` short circuits the chain: its return value becomes the response.
MiddlewareFunc = Callable[[AlexaRequestEnvelope, Handler], AlexaResponse]


def _bind(middleware: MiddlewareFunc, next_handler: Handler) -> Handler:
    def handler(request: AlexaRequestEnvelope) -> AlexaResponse:
        return middleware(request, next_handler)

    return handler


def compose(middleware: Iterable[MiddlewareFunc | None], handler: Handler) -> Handler:
    """
    Wrap ``handler`` in every middleware function.

    The first function in the list is the outermost: it runs first and sees
    the final response last. ``None`` entries are skipped.
    """
    for mw in reversed(list(middleware)):
        if mw is None:
            continue
        handler = _bind(mw, handler)
    return handler


class Middleware:
    """
    An ordered gauntlet of middleware to run before your handlers.

    Build it once and reuse it for as many routes as you like::

        mw = Middleware(request_logger(), require_account())
        skill.route_intent("AddTodoItem", mw.then(todo.add))
    """

    def __init__(self, *middleware: MiddlewareFunc | None) -> None:
        self._middleware = tuple(middleware)

    def __len__(self) -> int:
        return len(self._middleware)

    def then(self, handler: Handler) -> Handler:
        """Return a handler that runs the request through this chain before ``handler``."""
        return compose(self._middleware, handler)
