from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..models import Brief

SYSTEM_PROMPT = """You are MemeForge, an elite Italian social automation director.
Deliver ultra-structured YouTube Shorts plans that fuse Italian brainrot slang, comedic pacing,
and monetizable hooks. Respond strictly as JSON."""

USER_PROMPT_TEMPLATE = """Craft a complete automation-ready creative pack for a YouTube Short.
Topic: {topic}
Target runtime: {duration} seconds
Primary vibe: {vibe}
Channel goal: {channel_goal}
Extra notes: {extra_notes}

Requirements:
- Use viral Italian brainrot slang throughout, mix English catchphrases if it enhances virality.
- Provide sections: title, hook, description, callToAction, hashtags (array), voiceover (array of sentences with timestamp markers optional), shotList (array with scene, visuals, sfx), editingBeats (array with timestamp, action, notes), captions (array), soundtrack (array with trackIdea, vibe), bRollPrompts (array), automationStack (automation tools suggestions).
- Keep timestamps aligned to the runtime, start at 0s and progress quickly.
- Emphasize meme culture, calcio references, chaotic pacing, and agentic workflow automation tips.
- Voiceover must sound like a hyperactive Italian creator.
- automationStack should list concrete SaaS or AI tools to automate production.
- Keep JSON keys camelCase.
"""

TEMPERATURE = 0.8
TOP_P = 0.9
MAX_OUTPUT_TOKENS = 1400
JSON_RESPONSE_FORMAT = {"type": "json_object"}


@dataclass(frozen=True)
class GenerationRequest:
    system_prompt: str
    user_prompt: str
    temperature: float = TEMPERATURE
    top_p: float = TOP_P
    max_tokens: int = MAX_OUTPUT_TOKENS
    response_format: Dict[str, Any] = field(default_factory=lambda: dict(JSON_RESPONSE_FORMAT))

    def messages(self) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": self.user_prompt},
        ]


def build_user_prompt(brief: Brief) -> str:
    return USER_PROMPT_TEMPLATE.format(
        topic=brief.topic,
        duration=brief.duration_seconds,
        vibe=brief.vibe,
        channel_goal=brief.channel_goal,
        extra_notes=brief.extra_notes,
    )


def build_generation_request(brief: Brief) -> GenerationRequest:
    """Single-turn JSON generation request for ``brief``. Deterministic."""
    return GenerationRequest(
        system_prompt=SYSTEM_PROMPT,
        user_prompt=build_user_prompt(brief),
    )
