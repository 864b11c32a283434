"""
Pytest configuration and fixtures
"""
import json
from typing import Any, List, Optional

import pytest
from fastapi.testclient import TestClient

from memeforge.config import Settings
from memeforge.main import app, get_plan_generator
from memeforge.services.ai_service import PlanGenerator
from memeforge.services.prompt_service import GenerationRequest


class FakeProvider:
    """Records every request and answers with a canned body"""

    def __init__(self, response: Any = None, error: Optional[Exception] = None):
        if response is not None and not isinstance(response, str):
            response = json.dumps(response)
        self.response = response
        self.error = error
        self.requests: List[GenerationRequest] = []

    async def complete(self, request: GenerationRequest) -> Optional[str]:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, MISTRAL_API_KEY="test-key")


@pytest.fixture
def unconfigured_settings() -> Settings:
    return Settings(_env_file=None, MISTRAL_API_KEY=None)


@pytest.fixture
def make_client():
    """Build a TestClient whose generator uses the given settings and provider"""

    def _make(settings: Settings, provider: FakeProvider) -> TestClient:
        app.dependency_overrides[get_plan_generator] = lambda: PlanGenerator(settings, provider=provider)
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
