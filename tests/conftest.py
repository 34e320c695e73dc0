"""Pytest configuration and fixtures for tyria tests."""

import json
from typing import Any, Dict, Optional

import httpx
import pytest
import respx

from tyria.config import reset_settings

BASE_URL = "https://api.guildwars2.com"


# ============================================================================
# Response Helpers
# ============================================================================


def make_response(
    status_code: int = 200,
    json_data: Optional[Any] = None,
    text: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
) -> httpx.Response:
    """Create a real httpx.Response for testing."""
    if json_data is not None:
        return httpx.Response(status_code, content=json.dumps(json_data).encode(), headers=headers)
    return httpx.Response(status_code, text=text or "", headers=headers)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Keep TYRIA_* variables of the host out of the tests."""
    for name in ("TYRIA_BASE_URL", "TYRIA_LANG", "TYRIA_TOKEN", "TYRIA_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def response():
    """Factory for httpx.Response objects."""
    return make_response


@pytest.fixture
def base_url():
    """Default base URL for testing."""
    return BASE_URL


@pytest.fixture
def api():
    """respx router intercepting every request made through httpx."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def account_data():
    """Account body as returned by /v2/account."""
    return {
        "id": "123",
        "age": 7200,
        "name": "Zojja.1234",
        "world": 1001,
        "guilds": ["AAAA-BBBB"],
        "created": "2015-08-28T00:00:00Z",
        "access": ["GuildWars2", "HeartOfThorns"],
        "commander": True,
    }


@pytest.fixture
def achievement_data():
    """Achievement body as returned by /v2/achievements?id=1."""
    return {
        "id": 1,
        "name": "Centaur Slayer",
        "description": "",
        "requirement": "Kill 1 centaur.",
        "locked_text": "",
        "type": "Default",
        "flags": ["Pvp", "CategoryDisplay"],
        "tiers": [{"count": 1, "points": 5}],
        "rewards": [{"type": "Coins", "count": 100}],
    }


@pytest.fixture
def race_data():
    return {"id": "Asura", "name": "Asura", "skills": [12463, 12464]}


@pytest.fixture
def error_body():
    return {"text": "no such id"}
