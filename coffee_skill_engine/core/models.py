"""Core data transfer objects shared across layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from coffee_skill_engine.core.api_models import (
    OutputSpeech,
    Reprompt,
    RequestEnvelope,
    ResponseBody,
    ResponseEnvelope,
)
from coffee_skill_engine.core.intents import IntentType, resolve_intent


@dataclass(frozen=True, slots=True)
class CounterDetails:
    """Snapshot of a user's counter record."""

    count: int = 0
    last_maintenance: int = 0


@dataclass(slots=True)
class SkillRequest:
    """Normalized inbound request handed to the dispatcher."""

    request_type: str
    intent: IntentType
    user_id: str
    locale: str
    intent_name: Optional[str] = None
    reason: Optional[str] = None
    request_id: Optional[str] = None

    @classmethod
    def from_envelope(cls, envelope: RequestEnvelope, *, default_locale: str) -> "SkillRequest":
        """Build a SkillRequest from a parsed platform envelope."""
        user_id = envelope.user_id()
        if not user_id:
            raise ValueError("missing or invalid user id")
        body = envelope.request
        if not body.type:
            raise ValueError("missing request type")
        intent_name = body.intent.name if body.intent else None
        return cls(
            request_type=body.type,
            intent=resolve_intent(body.type, intent_name),
            user_id=user_id,
            locale=body.locale or default_locale,
            intent_name=intent_name,
            reason=body.reason,
            request_id=body.requestId,
        )


@dataclass(slots=True)
class SkillResponse:
    """Speech response produced by a handler."""

    speech_text: Optional[str] = None
    reprompt_text: Optional[str] = None
    should_end_session: Optional[bool] = None

    def to_envelope(self) -> ResponseEnvelope:
        """Render the response in the platform's wire format.

        A reprompt keeps the session open unless the handler decided otherwise.
        """
        should_end = self.should_end_session
        if self.reprompt_text is not None and should_end is None:
            should_end = False
        return ResponseEnvelope(
            response=ResponseBody(
                outputSpeech=(
                    OutputSpeech(text=self.speech_text) if self.speech_text is not None else None
                ),
                reprompt=(
                    Reprompt(outputSpeech=OutputSpeech(text=self.reprompt_text))
                    if self.reprompt_text is not None
                    else None
                ),
                shouldEndSession=should_end,
            )
        )


__all__ = ["CounterDetails", "SkillRequest", "SkillResponse"]
