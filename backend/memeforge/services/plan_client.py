import logging
from typing import Any, Optional

import httpx

from ..models import GenerationResult
from .normalizer import normalize

logger = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = "Qualcosa è andato storto, riprova"
MIN_FIELD_LENGTH = 3

EMPTY_RESULT = GenerationResult()


class PlanRequestError(Exception):
    """Raised when the generate endpoint answers with a non-2xx status"""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def can_generate(topic: str, vibe: str) -> bool:
    return len(topic.strip()) > MIN_FIELD_LENGTH and len(vibe.strip()) > MIN_FIELD_LENGTH


class PlanClient:
    """Presentation-side caller of ``POST /api/generate``.

    The response is run through the same normalizer the server uses, so the
    caller gets a renderable plan even if the server's output drifts.
    """

    def __init__(self, base_url: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.transport = transport

    async def generate(
        self,
        topic: str,
        vibe: str,
        length: str = "60",
        channel_goal: str = "",
        extra_details: str = "",
    ) -> GenerationResult:
        body = {
            "topic": topic,
            "length": length,
            "vibe": vibe,
            "channelGoal": channel_goal,
            "extraDetails": extra_details,
        }
        async with httpx.AsyncClient(base_url=self.base_url, transport=self.transport) as client:
            response = await client.post("/api/generate", json=body)

        if not response.is_success:
            message = self._error_message(response)
            logger.warning("Plan generation failed (%s): %s", response.status_code, message)
            raise PlanRequestError(message, response.status_code)

        return normalize(response.json())

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            data: Any = response.json()
        except ValueError:
            return FALLBACK_ERROR_MESSAGE
        if isinstance(data, dict) and isinstance(data.get("message"), str):
            return data["message"]
        return FALLBACK_ERROR_MESSAGE
