"""Tests for parsing Alexa request JSON."""

import json

from skillkit.models.request import AlexaRequestEnvelope
from skillkit.models.response import new_response

IDENTITY_JSON = """{
    "version": "1.0",
    "session": {
        "new": true,
        "sessionId": "session.123",
        "application": {"applicationId": "skill.456"},
        "user": {"userId": "account.789", "accessToken": "token.acb"}
    },
    "context": {
        "System": {
            "application": {"applicationId": "skill.456"},
            "user": {"userId": "account.789", "accessToken": "token.acb"},
            "device": {"deviceId": "device.def", "supportedInterfaces": {}},
            "apiEndpoint": "https://api.amazonalexa.com",
            "apiAccessToken": "3yJ0eXAiOiJKV1QiLCJhbGciOiJSUzI1NiJ9"
        }
    },
    "request": {
        "type": "IntentRequest",
        "requestId": "request.890",
        "timestamp": "2019-03-16T19:46:38Z",
        "locale": "en-US",
        "intent": {
            "name": "FooIntent",
            "confirmationStatus": "NONE",
            "slots": {
                "name": {
                    "name": "name",
                    "value": "Bob Loblaw",
                    "confirmationStatus": "NONE",
                    "source": "USER"
                }
            }
        },
        "dialogState": "COMPLETED"
    }
}"""


def _parse(text: str) -> AlexaRequestEnvelope:
    return AlexaRequestEnvelope.model_validate(json.loads(text))


def test_identity_info() -> None:
    """Test that identity fields are read from session and context."""
    request = _parse(IDENTITY_JSON)

    assert request.session.session_id == "session.123"
    assert request.session.application.application_id == "skill.456"
    assert request.session.user.user_id == "account.789"
    assert request.context.system.device.device_id == "device.def"
    assert request.context.system.user.access_token == "token.acb"
    assert request.request.intent.name == "FooIntent"
    assert request.request.dialog_state == "COMPLETED"

    assert request.session_id == "session.123"
    assert request.user_id == "account.789"
    assert request.user_access_token == "token.acb"
    assert request.device_id == "device.def"
    assert request.skill_id == "skill.456"
    assert request.locale == "en-US"
    assert request.type == "IntentRequest"


def test_identity_falls_back_to_session() -> None:
    """Test identity shorthands when only the session block is present."""
    request = AlexaRequestEnvelope.model_validate(
        {
            "session": {
                "sessionId": "session.1",
                "application": {"applicationId": "skill.2"},
                "user": {"userId": "account.3", "accessToken": "token.4"},
            },
            "request": {"type": "LaunchRequest"},
        }
    )
    assert request.user_id == "account.3"
    assert request.user_access_token == "token.4"
    assert request.skill_id == "skill.2"
    assert request.device_id == ""


def test_minimal_request() -> None:
    """Test that a bare request parses with empty identity."""
    request = AlexaRequestEnvelope.model_validate({"request": {"type": "LaunchRequest"}})
    assert request.intent is None
    assert request.session_id == ""
    assert request.user_id == ""
    assert request.user_access_token == ""
    assert request.skill_id == ""


def test_no_slots() -> None:
    """Test an intent without slots."""
    request = AlexaRequestEnvelope.model_validate(
        {"request": {"type": "IntentRequest", "locale": "en-US", "intent": {"name": "FooIntent"}}}
    )
    assert request.intent.slots == {}
    assert request.intent.resolve("askldfjaslkdfj") == ""


def test_multiple_slots() -> None:
    """Test slot values with and without resolution data."""
    request = AlexaRequestEnvelope.model_validate(
        {
            "request": {
                "type": "IntentRequest",
                "intent": {
                    "name": "FooIntent",
                    "slots": {
                        "name": {"name": "name", "value": "Bob Loblaw"},
                        "age": {"name": "age"},
                        "hobby": {
                            "name": "hobby",
                            "value": "gaming",
                            "resolutions": {
                                "resolutionsPerAuthority": [
                                    {
                                        "authority": "amzn1.er-authority.echo-sdk.hobby",
                                        "status": {"code": "ER_SUCCESS_MATCH"},
                                        "values": [{"value": {"name": "video games", "id": "VG"}}],
                                    }
                                ]
                            },
                        },
                    },
                },
            }
        }
    )
    slots = request.intent.slots
    assert slots["name"].value == "Bob Loblaw"
    assert request.intent.resolve("name") == "Bob Loblaw"
    assert slots["age"].value == ""
    assert request.intent.resolve("age") == ""
    assert slots["hobby"].value == "gaming"
    assert request.intent.resolve("hobby") == "video games"


def test_round_trip_preserves_identity() -> None:
    """Test that the request behind a response survives serialization."""
    original = _parse(IDENTITY_JSON)
    response = new_response(original).speak("Hi")

    wire = json.loads(json.dumps(response.to_wire()))
    assert "request" not in wire

    reparsed = AlexaRequestEnvelope.model_validate(json.loads(json.dumps(response.request.to_wire())))
    assert reparsed.session_id == original.session_id
    assert reparsed.user_id == original.user_id
    assert reparsed.user_access_token == original.user_access_token
    assert reparsed.device_id == original.device_id
    assert reparsed.skill_id == original.skill_id
    assert reparsed.locale == original.locale
    assert reparsed == original
