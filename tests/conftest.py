"""Shared test fixtures."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from resumancer.clients.llm_client import IdeaClient, LLMResponse
from resumancer.models.request import GenerationRequest
from resumancer.pipeline.orchestrator import IdeaOrchestrator


def _make_idea(category: str, title: str | None = None) -> dict:
    return {
        "category": category,
        "title": title or f"{category.capitalize()} idea",
        "why": "Builds on SQL skills and a love of dashboards.",
        "plan": "Pick a public dataset\nBuild the dashboard in Looker Studio\nWrite a LinkedIn post\nDM five hiring managers",
        "opener": "I built a readmission dashboard with open CMS data and would love your take.",
        "suggested_timeframe": "2 weeks",
    }


@pytest.fixture
def make_idea():
    return _make_idea


@pytest.fixture
def sample_ideas() -> list[dict]:
    return [
        _make_idea("practical", "Hospital readmissions dashboard"),
        _make_idea("creative", "Data-driven patient journey zine"),
        _make_idea("absurd", "Live-streamed SQL marathon for nurses"),
    ]


@pytest.fixture
def sample_payload(sample_ideas) -> str:
    return json.dumps({"ideas": sample_ideas})


@pytest.fixture
def sample_request() -> GenerationRequest:
    return GenerationRequest(
        mood=2,
        targetRole="Data Analyst",
        industry="Healthcare",
        skills=["SQL"],
        interests=["dashboards"],
    )


@pytest.fixture
def mock_idea_client(sample_payload) -> IdeaClient:
    """Create a mock IdeaClient returning a valid diverse payload."""
    client = AsyncMock(spec=IdeaClient)
    client.model = "claude-haiku-4-5-20251001"
    client.generate = AsyncMock(
        return_value=LLMResponse(text=sample_payload, input_tokens=900, output_tokens=400)
    )
    client.get_token_summary = MagicMock(
        return_value={
            "input": 900,
            "output": 400,
            "calls": [("claude-haiku-4-5-20251001", 900, 400)],
        }
    )
    return client


@pytest.fixture
def orchestrator(mock_idea_client) -> IdeaOrchestrator:
    return IdeaOrchestrator(lambda: mock_idea_client)
