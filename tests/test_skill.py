"""Tests for request routing."""

from unittest.mock import MagicMock

import pytest

from skillkit.exceptions import (
    MalformedRequestError,
    NoHandlerRegisteredError,
    UnknownIntentError,
    UnsupportedRequestTypeError,
)
from skillkit.models.request import AlexaRequestEnvelope
from skillkit.models.response import AlexaResponse, new_response
from skillkit.services.skill import Skill


@pytest.fixture
def skill() -> Skill:
    return Skill(name="Test")


def test_new_skill_is_not_configured(skill: Skill) -> None:
    """Test the idle state."""
    assert skill.configured is False
    skill.launch(lambda request: new_response(request))
    assert skill.configured is True


def test_routes_intent_to_its_handler(skill: Skill, make_request) -> None:
    """Test that intents are dispatched by name."""
    foo = MagicMock(return_value=new_response().speak("foo"))
    bar = MagicMock(return_value=new_response().speak("bar"))
    skill.route_intent("FooIntent", foo)
    skill.route_intent("BarIntent", bar)

    request = make_request(intent_name="BarIntent")
    response = skill.handle(request)

    assert response.response.output_speech.ssml == "<speak>bar</speak>"
    bar.assert_called_once_with(request)
    foo.assert_not_called()
    assert skill.intent_names == ["BarIntent", "FooIntent"]


def test_last_registration_wins(skill: Skill, make_request) -> None:
    """Test that re-registering an intent replaces the handler."""
    skill.route_intent("FooIntent", lambda request: new_response().speak("old"))
    skill.route_intent("FooIntent", lambda request: new_response().speak("new"))

    response = skill.handle(make_request(intent_name="FooIntent"))

    assert response.response.output_speech.ssml == "<speak>new</speak>"


def test_intent_decorator(skill: Skill, make_request) -> None:
    """Test registering with the decorator."""

    @skill.intent("FooIntent")
    def foo(request: AlexaRequestEnvelope) -> AlexaResponse:
        return new_response(request).speak("decorated")

    assert skill.handle(make_request(intent_name="FooIntent")).response.output_speech.ssml == (
        "<speak>decorated</speak>"
    )
    assert foo(make_request(intent_name="FooIntent")).response.output_speech is not None


def test_unknown_intent(skill: Skill, make_request) -> None:
    """Test that an unregistered intent fails and runs no handler."""
    foo = MagicMock()
    launch = MagicMock()
    skill.route_intent("FooIntent", foo)
    skill.launch(launch)

    with pytest.raises(UnknownIntentError) as exc_info:
        skill.handle(make_request(intent_name="NopeIntent"))

    assert exc_info.value.intent_name == "NopeIntent"
    foo.assert_not_called()
    launch.assert_not_called()


def test_intent_request_without_intent(skill: Skill, make_request) -> None:
    """Test that an IntentRequest must carry intent data."""
    skill.route_intent("FooIntent", MagicMock())
    with pytest.raises(MalformedRequestError):
        skill.handle(make_request(request_type="IntentRequest"))


def test_launch(skill: Skill, make_request) -> None:
    """Test dispatching a LaunchRequest."""
    skill.launch(lambda request: new_response(request).speak("Welcome").end_session(False))

    response = skill.handle(make_request(request_type="LaunchRequest"))

    assert response.response.output_speech.ssml == "<speak>Welcome</speak>"
    assert response.response.should_end_session is False


def test_launch_without_handler(skill: Skill, make_request) -> None:
    """Test that launching with nothing registered fails."""
    with pytest.raises(NoHandlerRegisteredError, match="LaunchRequest"):
        skill.handle(make_request(request_type="LaunchRequest"))


def test_can_fulfill_intent(skill: Skill, make_request) -> None:
    """Test dispatching the pre-flight check."""
    handler = MagicMock(return_value=new_response())
    skill.can_fulfill_intent(handler)

    request = make_request(request_type="CanFulfillIntentRequest", intent_name="FooIntent")
    skill.handle(request)

    handler.assert_called_once_with(request)


def test_can_fulfill_intent_without_handler(skill: Skill, make_request) -> None:
    """Test that the pre-flight check needs a handler."""
    with pytest.raises(NoHandlerRegisteredError, match="CanFulfillIntentRequest"):
        skill.handle(make_request(request_type="CanFulfillIntentRequest"))


@pytest.mark.parametrize("request_type", ["SessionEndedRequest", "AudioPlayer.PlaybackStarted", ""])
def test_unsupported_request_type(skill: Skill, make_request, request_type: str) -> None:
    """Test that other request types are rejected."""
    skill.launch(MagicMock())
    with pytest.raises(UnsupportedRequestTypeError):
        skill.handle(make_request(request_type=request_type))


def test_handler_errors_propagate(skill: Skill, make_request) -> None:
    """Test that dispatch does not swallow handler exceptions."""
    skill.route_intent("FooIntent", MagicMock(side_effect=RuntimeError("boom")))
    with pytest.raises(RuntimeError, match="boom"):
        skill.handle(make_request(intent_name="FooIntent"))
