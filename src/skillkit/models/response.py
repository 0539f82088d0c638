"""
Alexa Skill response models and the response builder.

``AlexaResponse`` is both the wire model and a builder. It is frozen: every
builder method returns a new response, so a partially built response can be
branched and reused safely::

    base = new_response(request).simple_card("Todo", "Your list")
    empty = base.speak("Your list is empty.")
    full = base.speak_template(LIST_TEMPLATE, items)

See https://developer.amazon.com/docs/custom-skills/request-and-response-json-reference.html#response-format
"""

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any, NoReturn

from pydantic import Field

from ..config import settings
from ..exceptions import HandlerFailedError, TemplateEvaluationError
from .request import AlexaModel, AlexaRequestEnvelope, AlexaSlot

if TYPE_CHECKING:
    from ..services.speech import Template

logger = logging.getLogger(__name__)

TEMPLATE_FAILURE_SPEECH = "I'm sorry. I seem to have trouble with words, today."


class AlexaOutputSpeech(AlexaModel):
    """Alexa speech output."""

    type: str = "SSML"
    ssml: str | None = None
    text: str | None = None


class AlexaCard(AlexaModel):
    """Alexa card for visual display."""

    type: str = "Simple"
    title: str
    content: str


class AlexaReprompt(AlexaModel):
    output_speech: AlexaOutputSpeech = Field(..., alias="outputSpeech")


class AlexaUpdatedIntent(AlexaModel):
    name: str
    confirmation_status: str = Field("NONE", alias="confirmationStatus")
    slots: dict[str, AlexaSlot] = {}


class AlexaDirective(AlexaModel):
    """Follow-up instruction for the device, e.g. Dialog.ElicitSlot."""

    type: str
    slot_to_elicit: str | None = Field(None, alias="slotToElicit")
    updated_intent: AlexaUpdatedIntent | None = Field(None, alias="updatedIntent")


class AlexaResponseBody(AlexaModel):
    """Alexa response body."""

    output_speech: AlexaOutputSpeech | None = Field(None, alias="outputSpeech")
    card: AlexaCard | None = None
    reprompt: AlexaReprompt | None = None
    directives: list[AlexaDirective] | None = None
    should_end_session: bool | None = Field(None, alias="shouldEndSession")


class AlexaResponse(AlexaModel):
    """Full Alexa response envelope."""

    request: AlexaRequestEnvelope | None = Field(None, exclude=True)
    version: str = "1.0"
    session_attributes: dict[str, Any] | None = Field(None, alias="sessionAttributes")
    response: AlexaResponseBody = AlexaResponseBody()

    def _with_body(self, **changes: Any) -> "AlexaResponse":
        return self.model_copy(update={"response": self.response.model_copy(update=changes)})

    @property
    def locale(self) -> str:
        if self.request and self.request.locale:
            return self.request.locale
        return settings.default_locale

    def end_session(self, flag: bool) -> "AlexaResponse":
        """Whether the dialog with the user is over after this response."""
        return self._with_body(should_end_session=flag)

    def speak(self, text_or_ssml: str) -> "AlexaResponse":
        """Set what Alexa should say. Plain text is wrapped in <speak> for you."""
        return self._with_body(output_speech=AlexaOutputSpeech(ssml=wrap_ssml(text_or_ssml)))

    def speak_template(self, template: "Template", value: Any = None) -> "AlexaResponse":
        """
        Evaluate ``template`` for the request's locale and speak the result.

        A template that fails to render is logged and the user hears a generic
        apology instead.
        """
        from ..services.speech import TemplateContext

        try:
            text_or_ssml = template.eval(
                TemplateContext(language=self.locale, now=datetime.now(), value=value)
            )
        except TemplateEvaluationError as e:
            logger.error(f"Unable to speak template: {e}")
            return self.speak(TEMPLATE_FAILURE_SPEECH)
        return self.speak(text_or_ssml)

    def simple_card(self, title: str, text: str) -> "AlexaResponse":
        """What a screen device (or the Alexa app history) should show."""
        return self._with_body(card=AlexaCard(title=title, content=text))

    def elicit_slot(
        self, request: AlexaRequestEnvelope, intent_name: str, slot_name: str
    ) -> "AlexaResponse":
        """
        Keep the session open and have the device listen for a single slot.

        Whatever the user says next fills ``slot_name``, and every other slot from
        ``request`` is carried over to ``intent_name``. Pair this with ``speak()``
        so the user actually hears a question.
        """
        from ..services.slots import clone_slots

        slots = clone_slots(request.intent.slots if request.intent else None)
        slots[slot_name] = AlexaSlot(name=slot_name, value="")

        directive = AlexaDirective(
            type="Dialog.ElicitSlot",
            slot_to_elicit=slot_name,
            updated_intent=AlexaUpdatedIntent(name=intent_name, confirmation_status="NONE", slots=slots),
        )
        directives = [*(self.response.directives or []), directive]

        # The user has to be able to answer, so the session cannot end here.
        return self._with_body(directives=directives, should_end_session=False)

    def reprompt(self, text_or_ssml: str) -> "AlexaResponse":
        """Second prompt played if the user says nothing after an elicitation."""
        speech = AlexaOutputSpeech(ssml=wrap_ssml(text_or_ssml))
        return self._with_body(reprompt=AlexaReprompt(output_speech=speech))

    def with_session_attributes(self, attributes: dict[str, Any]) -> "AlexaResponse":
        """Attributes Alexa hands back on the next request of this session."""
        return self.model_copy(update={"session_attributes": dict(attributes)})

    def ok(self) -> "AlexaResponse":
        """Finish building. Reads well as the last call in a handler."""
        return self

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict in Alexa's response format."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def new_response(request: AlexaRequestEnvelope | None = None) -> AlexaResponse:
    """
    Start a response to ``request``.

    Every interaction ends the session unless you say otherwise.
    """
    return AlexaResponse(request=request).end_session(True)


def fail(message: str) -> NoReturn:
    """
    Give up on the request entirely.

    Only for unexpected, unrecoverable paths. If the skill simply has nothing
    useful to say, speak an apology instead.
    """
    raise HandlerFailedError(message)


def wrap_ssml(text_or_ssml: str) -> str:
    """Wrap plain text in <speak> tags, leaving existing SSML alone."""
    if text_or_ssml.startswith("<speak"):
        return text_or_ssml
    return f"<speak>{text_or_ssml}</speak>"
