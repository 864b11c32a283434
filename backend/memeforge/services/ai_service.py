import json
import logging
from typing import Any, Optional, Protocol

from mistralai import Mistral

from ..config import Settings
from ..errors import ConfigurationError, GenerationError
from ..models import Brief, GenerationResult
from .normalizer import normalize
from .prompt_service import GenerationRequest, build_generation_request

logger = logging.getLogger(__name__)


class GenerationProvider(Protocol):
    async def complete(self, request: GenerationRequest) -> Optional[str]:
        ...


class MistralProvider:
    """Single non-streaming chat completion against Mistral"""

    def __init__(self, api_key: str, model: str):
        self.model = model
        self.mistral_client = Mistral(api_key=api_key)

    async def complete(self, request: GenerationRequest) -> Optional[str]:
        chat_response = await self.mistral_client.chat.complete_async(
            model=self.model,
            messages=request.messages(),
            temperature=request.temperature,
            top_p=request.top_p,
            max_tokens=request.max_tokens,
            response_format=request.response_format,
        )
        if not chat_response or not chat_response.choices:
            return None
        content = chat_response.choices[0].message.content
        # Chunked content is not a JSON body
        return content if isinstance(content, str) else None


class PlanGenerator:
    def __init__(self, settings: Settings, provider: Optional[GenerationProvider] = None):
        self.settings = settings
        self.provider = provider

    def ensure_configured(self) -> None:
        if not self.settings.provider_configured or self.provider is None:
            raise ConfigurationError("MISTRAL_API_KEY mancante. Configura l'ambiente.")

    async def handle(self, payload: Any) -> GenerationResult:
        """Turn a raw brief payload into a normalized production plan.

        Raises ConfigurationError before anything else when no credential is
        set, ValidationError on an incomplete brief, and GenerationError when
        the provider returns no text. A provider body that is not valid JSON
        raises ``json.JSONDecodeError`` untouched.
        """
        self.ensure_configured()

        brief = Brief.from_payload(payload)
        request = build_generation_request(brief)

        logger.info(
            "Generating plan for topic=%r duration=%ss", brief.topic, brief.duration_seconds
        )
        output_text = await self.provider.complete(request)
        if not output_text:
            raise GenerationError("Risposta modello non valida")

        parsed = json.loads(output_text)
        return normalize(parsed)
