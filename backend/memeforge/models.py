# backend/memeforge/models.py
import re
from typing import Any, Dict, List, Mapping

from pydantic import BaseModel, ConfigDict, Field

from .errors import ValidationError

DEFAULT_DURATION_SECONDS = 60
DEFAULT_CHANNEL_GOAL = "grow the channel"
DEFAULT_EXTRA_NOTES = "no additional info"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def resolve_duration(value: Any) -> int:
    """Parse the leading integer of ``value`` the way a form field is read.

    ``"45"`` and ``"45s"`` give 45, ``45.9`` gives 45. Anything without a
    leading integer (``"abc"``, ``None``, booleans, ``inf``) falls back to
    :data:`DEFAULT_DURATION_SECONDS`.
    """
    if isinstance(value, bool) or value is None:
        return DEFAULT_DURATION_SECONDS
    match = _LEADING_INT.match(str(value))
    if not match:
        return DEFAULT_DURATION_SECONDS
    return int(match.group(1))


def _optional_text(value: Any, default: str) -> str:
    if value is None:
        return default
    return value if isinstance(value, str) else str(value)


class Brief(BaseModel):
    topic: str
    vibe: str
    duration_seconds: int = DEFAULT_DURATION_SECONDS
    channel_goal: str = DEFAULT_CHANNEL_GOAL
    extra_notes: str = DEFAULT_EXTRA_NOTES

    @classmethod
    def from_payload(cls, payload: Any) -> "Brief":
        """Build a brief from the raw request body.

        Non-object bodies are read as an empty record, so they fail the
        required-field check like any other incomplete brief.
        """
        if not isinstance(payload, Mapping):
            payload = {}

        topic = payload.get("topic")
        vibe = payload.get("vibe")
        if not topic or not vibe:
            raise ValidationError("Topic e vibe sono obbligatori")

        return cls(
            topic=topic if isinstance(topic, str) else str(topic),
            vibe=vibe if isinstance(vibe, str) else str(vibe),
            duration_seconds=resolve_duration(payload.get("length")),
            channel_goal=_optional_text(payload.get("channelGoal"), DEFAULT_CHANNEL_GOAL),
            extra_notes=_optional_text(payload.get("extraDetails"), DEFAULT_EXTRA_NOTES),
        )


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ShotListItem(_CamelModel):
    scene: str
    visuals: str
    sfx: str


class EditingBeat(_CamelModel):
    timestamp: str
    action: str
    notes: str


class SoundtrackItem(_CamelModel):
    track_idea: str = Field(alias="trackIdea")
    vibe: str


class GenerationResult(_CamelModel):
    title: str = ""
    hook: str = ""
    description: str = ""
    call_to_action: str = Field(default="", alias="callToAction")
    hashtags: List[str] = Field(default_factory=list)
    voiceover: List[str] = Field(default_factory=list)
    captions: List[str] = Field(default_factory=list)
    b_roll_prompts: List[str] = Field(default_factory=list, alias="bRollPrompts")
    automation_stack: List[str] = Field(default_factory=list, alias="automationStack")
    shot_list: List[ShotListItem] = Field(default_factory=list, alias="shotList")
    editing_beats: List[EditingBeat] = Field(default_factory=list, alias="editingBeats")
    soundtrack: List[SoundtrackItem] = Field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        """Wire representation with camelCase keys"""
        return self.model_dump(by_alias=True)


class ErrorResponse(BaseModel):
    message: str
