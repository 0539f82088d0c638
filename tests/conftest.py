"""Shared fixtures."""

from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

from skillkit.main import create_app
from skillkit.models.request import AlexaRequestEnvelope
from skillkit.sample.app import build_skill
from skillkit.sample.repository import TodoRepository

RequestFactory = Callable[..., dict[str, Any]]


def build_payload(
    request_type: str = "IntentRequest",
    intent_name: str | None = None,
    slots: dict[str, Any] | None = None,
    locale: str = "en-US",
    user_id: str = "account.789",
    access_token: str | None = "token.abc",
    device_id: str = "device.def",
) -> dict[str, Any]:
    """Build a raw Alexa request envelope the way the Alexa service sends it."""
    user: dict[str, Any] = {"userId": user_id}
    if access_token:
        user["accessToken"] = access_token

    body: dict[str, Any] = {
        "type": request_type,
        "requestId": "request.890",
        "timestamp": "2019-03-16T19:46:38Z",
        "locale": locale,
    }
    if intent_name is not None:
        body["intent"] = {"name": intent_name, "confirmationStatus": "NONE", "slots": slots or {}}

    return {
        "version": "1.0",
        "session": {
            "new": True,
            "sessionId": "session.123",
            "application": {"applicationId": "skill.456"},
            "user": user,
        },
        "context": {
            "System": {
                "application": {"applicationId": "skill.456"},
                "user": user,
                "device": {"deviceId": device_id, "supportedInterfaces": {}},
                "apiEndpoint": "https://api.amazonalexa.com",
                "apiAccessToken": "api.token",
            }
        },
        "request": body,
    }


@pytest.fixture
def payload() -> RequestFactory:
    return build_payload


@pytest.fixture
def make_request() -> Callable[..., AlexaRequestEnvelope]:
    def factory(**kwargs: Any) -> AlexaRequestEnvelope:
        return AlexaRequestEnvelope.model_validate(build_payload(**kwargs))

    return factory


@pytest.fixture
def repository() -> TodoRepository:
    return TodoRepository()


@pytest.fixture
def client(repository: TodoRepository) -> TestClient:
    return TestClient(create_app(build_skill(repository)))
