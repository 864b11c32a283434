import json

import httpx
import pytest

from memeforge.models import GenerationResult, ShotListItem
from memeforge.services.plan_client import (EMPTY_RESULT, FALLBACK_ERROR_MESSAGE, PlanClient,
                                            PlanRequestError, can_generate)


def _client(handler) -> PlanClient:
    return PlanClient("http://testserver", transport=httpx.MockTransport(handler))


@pytest.mark.parametrize(
    "topic, vibe, expected",
    [
        ("gatto influencer", "chaotic", True),
        ("gatto", "   abc   ", False),
        ("abc", "chaotic", False),
        ("abcd", "wxyz", True),
    ],
)
def test_can_generate(topic, vibe, expected):
    assert can_generate(topic, vibe) is expected


def test_empty_result_has_every_field():
    assert EMPTY_RESULT == GenerationResult()
    assert EMPTY_RESULT.to_payload()["shotList"] == []


@pytest.mark.asyncio
async def test_generate_posts_brief_and_renormalizes():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        # A server that drifted away from the contract
        return httpx.Response(
            200,
            json={"title": "Gatto", "shotList": [{"scene": "S1"}, "oops"], "hashtags": ["#a", None]},
        )

    result = await _client(handler).generate("gatto influencer", "chaotic", length="45")

    assert seen["path"] == "/api/generate"
    assert seen["body"] == {
        "topic": "gatto influencer",
        "length": "45",
        "vibe": "chaotic",
        "channelGoal": "",
        "extraDetails": "",
    }
    assert result.title == "Gatto"
    assert result.hashtags == ["#a"]
    assert result.shot_list == [
        ShotListItem(scene="S1", visuals="Visual glitch + overlay meme", sfx="Bass boost + risate")
    ]


@pytest.mark.asyncio
async def test_generate_surfaces_server_message():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"message": "Topic e vibe sono obbligatori"})

    with pytest.raises(PlanRequestError) as exc:
        await _client(handler).generate("gatto", "")
    assert exc.value.status_code == 400
    assert exc.value.message == "Topic e vibe sono obbligatori"


@pytest.mark.asyncio
async def test_generate_falls_back_when_error_body_is_unreadable():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="<html>bad gateway</html>")

    with pytest.raises(PlanRequestError) as exc:
        await _client(handler).generate("gatto influencer", "chaotic")
    assert exc.value.message == FALLBACK_ERROR_MESSAGE
