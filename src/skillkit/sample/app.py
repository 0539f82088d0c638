"""Wiring for the sample to-do skill."""

from ..main import create_handler
from ..models.request import AlexaRequestEnvelope
from ..models.response import AlexaResponse, new_response
from ..services.interceptors import request_logger, require_account
from ..services.middleware import Middleware
from ..services.skill import (
    INTENT_NAME_CANCEL,
    INTENT_NAME_FALLBACK,
    INTENT_NAME_HELP,
    INTENT_NAME_NAVIGATE_HOME,
    INTENT_NAME_STOP,
    Skill,
)
from ..services.speech import Template, with_translation
from .repository import TodoRepository
from .service import (
    INTENT_ADD_TODO_ITEM,
    INTENT_LIST_TODO_ITEMS,
    INTENT_REMOVE_TODO_ITEM,
    TodoService,
)

WELCOME = Template(
    "Welcome to your to-do list. You can add, remove, or list items.",
    with_translation("es", "Bienvenido a tu lista de tareas. Puedes añadir, quitar o listar cosas."),
)
LINK_ACCOUNT = Template(
    "Link up your account in the Alexa app to use your to-do list.",
    with_translation("es", "Vincula tu cuenta en la app de Alexa para usar tu lista de tareas."),
)


def build_skill(repository: TodoRepository | None = None) -> Skill:
    """Register every handler of the to-do skill."""
    skill = Skill(name="Todo List")

    # List management logs every request and turns away users that haven't linked an account.
    mw = Middleware(request_logger(), require_account(LINK_ACCOUNT))
    todo = TodoService(repository or TodoRepository())
    skill.route_intent(INTENT_ADD_TODO_ITEM, mw.then(todo.add))
    skill.route_intent(INTENT_REMOVE_TODO_ITEM, mw.then(todo.remove))
    skill.route_intent(INTENT_LIST_TODO_ITEMS, mw.then(todo.list_items))

    _register_amazon_intents(skill)
    return skill


def _register_amazon_intents(skill: Skill) -> None:
    @skill.launch
    def launch(request: AlexaRequestEnvelope) -> AlexaResponse:
        return new_response(request).speak_template(WELCOME).end_session(False).ok()

    @skill.intent(INTENT_NAME_CANCEL)
    def cancel(request: AlexaRequestEnvelope) -> AlexaResponse:
        return new_response(request).speak("Canceling.").ok()

    @skill.intent(INTENT_NAME_STOP)
    def stop(request: AlexaRequestEnvelope) -> AlexaResponse:
        return new_response(request).ok()

    @skill.intent(INTENT_NAME_HELP)
    def help_(request: AlexaRequestEnvelope) -> AlexaResponse:
        return (
            new_response(request)
            .speak("You can ask me to add, remove, or list items.")
            .end_session(False)
            .ok()
        )

    @skill.intent(INTENT_NAME_FALLBACK)
    def fallback(request: AlexaRequestEnvelope) -> AlexaResponse:
        return new_response(request).speak("I'm sorry. This skill doesn't know how to do that.").ok()

    @skill.intent(INTENT_NAME_NAVIGATE_HOME)
    def navigate_home(request: AlexaRequestEnvelope) -> AlexaResponse:
        return new_response(request).ok()


skill = build_skill()

# Lambda handler: point the function at skillkit.sample.app.handler
handler = create_handler(skill)
