"""Intent handlers for the sample to-do skill."""

import logging

from ..models.request import AlexaRequestEnvelope
from ..models.response import AlexaResponse, new_response
from ..services.speech import Template, with_func, with_translation
from .repository import ItemNotFoundError, TodoRepository

logger = logging.getLogger(__name__)

SLOT_ITEM_NAME = "item_name"
INTENT_ADD_TODO_ITEM = "AddTodoItem"
INTENT_REMOVE_TODO_ITEM = "RemoveTodoItem"
INTENT_LIST_TODO_ITEMS = "ListTodoItems"


def plural(count: int, singular: str, many: str) -> str:
    return singular if count == 1 else many


ASK_ADD = Template(
    "What would you like to add to your list?",
    with_translation("es", "¿Qué quieres añadir a tu lista?"),
)
ASK_REMOVE = Template(
    "What would you like to remove from your list?",
    with_translation("es", "¿Qué quieres quitar de tu lista?"),
)
ADDED = Template(
    'Okay. I have added "{{ value }}" to your list.',
    with_translation("es", 'Vale. He añadido "{{ value }}" a tu lista.'),
)
REMOVED = Template(
    'Okay. I have removed "{{ value }}" from your list.',
    with_translation("es", 'Vale. He quitado "{{ value }}" de tu lista.'),
)
NOT_FOUND = Template(
    'Hmm. I could not find "{{ value }}" on your list.',
    with_translation("es", 'Mmm. No encuentro "{{ value }}" en tu lista.'),
)
EMPTY = Template(
    "Hmm. Your list is empty.",
    with_translation("es", "Mmm. Tu lista está vacía."),
)
# with_func() may follow the translations that call it.
LISTED = Template(
    "I found {{ value|length }} {{ plural(value|length, 'item', 'items') }} in your list. "
    "{% for item in value %}{{ item }}. {% endfor %}",
    with_translation(
        "es",
        "Encontré {{ value|length }} {{ plural(value|length, 'cosa', 'cosas') }} en tu lista. "
        "{% for item in value %}{{ item }}. {% endfor %}",
    ),
    with_func("plural", plural),
)


class TodoService:
    """Handlers for adding, removing and listing items on a user's to-do list."""

    def __init__(self, repository: TodoRepository) -> None:
        self.repository = repository

    def add(self, request: AlexaRequestEnvelope) -> AlexaResponse:
        """
        Add the item the user named, e.g. "Add laundry to my to-do list".

        "Update my list" arrives without an item. That is not a failure: Alexa
        asks the user for the item and this intent comes back with it filled in.
        """
        item_name = request.intent.resolve(SLOT_ITEM_NAME)
        if not item_name:
            return (
                new_response(request)
                .speak_template(ASK_ADD)
                .elicit_slot(request, INTENT_ADD_TODO_ITEM, SLOT_ITEM_NAME)
                .reprompt("Please name the item to add.")
                .ok()
            )

        self.repository.add_item(request.user_id, item_name)
        return new_response(request).speak_template(ADDED, item_name).ok()

    def remove(self, request: AlexaRequestEnvelope) -> AlexaResponse:
        item_name = request.intent.resolve(SLOT_ITEM_NAME)
        if not item_name:
            return (
                new_response(request)
                .speak_template(ASK_REMOVE)
                .elicit_slot(request, INTENT_REMOVE_TODO_ITEM, SLOT_ITEM_NAME)
                .ok()
            )

        try:
            self.repository.remove_item(request.user_id, item_name)
        except ItemNotFoundError:
            logger.info(f"Item not found for removal: {item_name}")
            return new_response(request).speak_template(NOT_FOUND, item_name).ok()

        return new_response(request).speak_template(REMOVED, item_name).ok()

    def list_items(self, request: AlexaRequestEnvelope) -> AlexaResponse:
        items = self.repository.get_items(request.user_id)
        if not items:
            return new_response(request).speak_template(EMPTY).ok()

        return (
            new_response(request)
            .speak_template(LISTED, items)
            .simple_card("Your To-Do List", "\n".join(items))
            .ok()
        )
