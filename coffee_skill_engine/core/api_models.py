"""Wire models for the voice platform request and response envelopes."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class _EnvelopeModel(BaseModel):
    """Base model tolerant of the many fields the skill never reads."""

    model_config = ConfigDict(extra="ignore")


class EnvelopeUser(_EnvelopeModel):
    """Platform-assigned user identity."""

    userId: str


class EnvelopeApplication(_EnvelopeModel):
    """Skill identity the envelope is addressed to."""

    applicationId: str


class EnvelopeSession(_EnvelopeModel):
    """Conversation session carrying the stable user identifier."""

    sessionId: Optional[str] = None
    new: bool = False
    user: Optional[EnvelopeUser] = None
    application: Optional[EnvelopeApplication] = None


class EnvelopeSystem(_EnvelopeModel):
    """``context.System`` block, present on session-less requests too."""

    user: Optional[EnvelopeUser] = None
    application: Optional[EnvelopeApplication] = None


class EnvelopeContext(_EnvelopeModel):
    """Device context; only the ``System`` block is consulted."""

    System: Optional[EnvelopeSystem] = None


class EnvelopeIntent(_EnvelopeModel):
    """Platform-resolved intent with its slots."""

    name: str
    slots: dict[str, Any] = Field(default_factory=dict)


class EnvelopeRequest(_EnvelopeModel):
    """Inner request body: type, locale, and the optional intent."""

    type: str
    requestId: Optional[str] = None
    locale: Optional[str] = None
    intent: Optional[EnvelopeIntent] = None
    reason: Optional[str] = None


class RequestEnvelope(_EnvelopeModel):
    """Full inbound request envelope posted by the voice platform."""

    version: str = "1.0"
    session: Optional[EnvelopeSession] = None
    context: Optional[EnvelopeContext] = None
    request: EnvelopeRequest

    def user_id(self) -> Optional[str]:
        """Return the user id from the session, falling back to the device context."""
        if self.session and self.session.user:
            return self.session.user.userId
        if self.context and self.context.System and self.context.System.user:
            return self.context.System.user.userId
        return None

    def application_id(self) -> Optional[str]:
        """Return the skill id the envelope is addressed to, if present."""
        if self.session and self.session.application:
            return self.session.application.applicationId
        if self.context and self.context.System and self.context.System.application:
            return self.context.System.application.applicationId
        return None


class OutputSpeech(BaseModel):
    """Plain text speech rendered by the platform's TTS."""

    type: Literal["PlainText"] = "PlainText"
    text: str


class Reprompt(BaseModel):
    """Speech played when the user stays silent with the session open."""

    outputSpeech: OutputSpeech


class ResponseBody(BaseModel):
    """Inner response body."""

    outputSpeech: Optional[OutputSpeech] = None
    reprompt: Optional[Reprompt] = None
    shouldEndSession: Optional[bool] = None


class ResponseEnvelope(BaseModel):
    """Full outbound response envelope returned to the voice platform."""

    version: str = "1.0"
    sessionAttributes: dict[str, Any] = Field(default_factory=dict)
    response: ResponseBody


__all__ = [
    "EnvelopeApplication",
    "EnvelopeContext",
    "EnvelopeIntent",
    "EnvelopeRequest",
    "EnvelopeSession",
    "EnvelopeSystem",
    "EnvelopeUser",
    "OutputSpeech",
    "Reprompt",
    "RequestEnvelope",
    "ResponseBody",
    "ResponseEnvelope",
]
