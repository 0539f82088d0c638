"""Alexa Skill request models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

RESOLUTION_SUCCESS_CODE = "ER_SUCCESS_MATCH"


class RequestType(str, Enum):
    """Request types the skill router knows how to dispatch."""

    INTENT = "IntentRequest"
    LAUNCH = "LaunchRequest"
    CAN_FULFILL_INTENT = "CanFulfillIntentRequest"


class AlexaModel(BaseModel):
    """Frozen base for wire models that map snake_case onto Alexa's camelCase."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ResolutionValue(AlexaModel):
    """Canonical value from a resolution authority."""

    name: str = ""
    id: str = ""


class ResolutionValueWrapper(AlexaModel):
    value: ResolutionValue = ResolutionValue()


class ResolutionStatus(AlexaModel):
    code: str = ""


class ResolutionPerAuthority(AlexaModel):
    """Entity resolution results from a single authority."""

    authority: str = ""
    status: ResolutionStatus = ResolutionStatus()
    values: list[ResolutionValueWrapper] = []


class Resolutions(AlexaModel):
    resolutions_per_authority: list[ResolutionPerAuthority] = Field(
        default_factory=list, alias="resolutionsPerAuthority"
    )


class AlexaSlot(AlexaModel):
    """Alexa slot value."""

    name: str
    value: str = ""
    confirmation_status: str | None = Field(None, alias="confirmationStatus")
    resolutions: Resolutions | None = None

    @field_validator("value", mode="before")
    @classmethod
    def _null_value_is_empty(cls, value: Any) -> Any:
        # Alexa sends "value": null for slots the user did not fill.
        return "" if value is None else value

    def resolve(self) -> str:
        """Return the resolved value of this slot."""
        from ..services.slots import resolve_slot

        return resolve_slot(self)


class AlexaIntent(AlexaModel):
    """Alexa intent with slots."""

    name: str
    slots: dict[str, AlexaSlot] = {}
    confirmation_status: str = Field("NONE", alias="confirmationStatus")

    def resolve(self, slot_name: str) -> str:
        """Return the resolved value of the named slot, or an empty string."""
        from ..services.slots import resolve

        return resolve(self.slots, slot_name)


class AlexaRequest(AlexaModel):
    """Alexa request payload."""

    type: str
    request_id: str = Field("", alias="requestId")
    timestamp: str = ""
    locale: str = ""
    intent: AlexaIntent | None = None
    reason: str | None = None
    dialog_state: str | None = Field(None, alias="dialogState")


class AlexaApplication(AlexaModel):
    application_id: str = Field("", alias="applicationId")


class AlexaUser(AlexaModel):
    user_id: str = Field("", alias="userId")
    access_token: str | None = Field(None, alias="accessToken")


class AlexaDevice(AlexaModel):
    device_id: str = Field("", alias="deviceId")
    supported_interfaces: dict[str, Any] = Field(default_factory=dict, alias="supportedInterfaces")


class AlexaSession(AlexaModel):
    """Alexa session information."""

    session_id: str = Field("", alias="sessionId")
    new: bool = True
    application: AlexaApplication = AlexaApplication()
    attributes: dict[str, Any] = {}
    user: AlexaUser = AlexaUser()


class AlexaSystem(AlexaModel):
    application: AlexaApplication = AlexaApplication()
    user: AlexaUser = AlexaUser()
    device: AlexaDevice = AlexaDevice()
    api_endpoint: str = Field("", alias="apiEndpoint")
    api_access_token: str = Field("", alias="apiAccessToken")


class AlexaAudioPlayer(AlexaModel):
    player_activity: str = Field("", alias="playerActivity")
    token: str = ""
    offset_in_milliseconds: int = Field(0, alias="offsetInMilliseconds")


class AlexaContext(AlexaModel):
    system: AlexaSystem = Field(default_factory=AlexaSystem, alias="System")
    audio_player: AlexaAudioPlayer | None = Field(None, alias="AudioPlayer")


class AlexaRequestEnvelope(AlexaModel):
    """
    Full Alexa request envelope.

    This is the event handed to every skill handler. The identity properties
    read from ``context.System`` first, since that block is present on every
    request type, and fall back to ``session`` for requests that only carry one.
    """

    version: str = "1.0"
    session: AlexaSession | None = None
    request: AlexaRequest
    context: AlexaContext = AlexaContext()

    @property
    def type(self) -> str:
        return self.request.type

    @property
    def intent(self) -> AlexaIntent | None:
        return self.request.intent

    @property
    def locale(self) -> str:
        return self.request.locale

    @property
    def session_id(self) -> str:
        return self.session.session_id if self.session else ""

    @property
    def user_id(self) -> str:
        if self.context.system.user.user_id:
            return self.context.system.user.user_id
        return self.session.user.user_id if self.session else ""

    @property
    def user_access_token(self) -> str:
        if self.context.system.user.access_token:
            return self.context.system.user.access_token
        if self.session and self.session.user.access_token:
            return self.session.user.access_token
        return ""

    @property
    def device_id(self) -> str:
        return self.context.system.device.device_id

    @property
    def skill_id(self) -> str:
        if self.context.system.application.application_id:
            return self.context.system.application.application_id
        return self.session.application.application_id if self.session else ""

    def to_wire(self) -> dict[str, Any]:
        """Dump back into Alexa's JSON shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
