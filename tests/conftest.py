"""Shared pytest fixtures for the self_map test suite.

These fixtures provide:
* A queued-response OpenAI client stand-in for the generator
* Small hand-built self maps alongside the bundled sample
* A canonical valid JSON document
"""

from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any, Dict, List

import pytest

from self_map.config import ViewConfig
from self_map.models import Association, Entry, SelfMapData
from self_map.sample import DEFAULT_DATA


class DummyLLMClient:
    """Minimal OpenAI-compatible client for deterministic unit tests."""

    def __init__(self) -> None:
        self._queued: List[Any] = []
        self.calls: List[Dict[str, Any]] = []
        self.chat = SimpleNamespace(
            completions=SimpleNamespace(create=self._create_completion)
        )

    def queue_response(self, payload: Any) -> None:
        """Add a JSON (or dict) response to the outgoing queue."""
        if not isinstance(payload, str):
            payload = json.dumps(payload)
        self._queued.append(payload)

    def queue_error(self, exc: Exception) -> None:
        self._queued.append(exc)

    def _create_completion(self, **kwargs: Any) -> SimpleNamespace:
        if not self._queued:
            raise AssertionError("DummyLLMClient received a call with no queued responses.")
        content = self._queued.pop(0)
        self.calls.append(kwargs)
        if isinstance(content, Exception):
            raise content
        return SimpleNamespace(
            choices=[
                SimpleNamespace(
                    message=SimpleNamespace(content=content)
                )
            ]
        )


# ---------------------------------------------------------------------------
# Mock LLM fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_openai_client():
    """Provide a queued-response OpenAI client stand-in."""
    return DummyLLMClient()


# ---------------------------------------------------------------------------
# Data fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_data() -> SelfMapData:
    return DEFAULT_DATA


@pytest.fixture
def sample_document() -> Dict[str, Any]:
    """Valid upload document with one association per relation type."""
    return {
        "entries": [
            {"label": "Mentor", "category": "People", "power": 0.8, "valence": 0.7},
            {"label": "Marathon", "category": "Accomplishments", "power": 0.6, "valence": 0.9},
            {"label": "Layoff", "category": "Life Story", "power": 0.5, "valence": -0.6},
            {"label": "Chess", "category": "Ideas/Likes", "power": 0.4, "valence": 0.5},
        ],
        "associations": [
            {"src": "Mentor", "dst": "Marathon", "relation": "affirms", "weight": 0.7},
            {"src": "Layoff", "dst": "Marathon", "relation": "threatens", "weight": 0.4},
            {"src": "Chess", "dst": "Mentor", "relation": "associates_with", "weight": 0.5},
        ],
    }


@pytest.fixture
def two_people() -> List[Entry]:
    """Two People entries deliberately given in reverse label order."""
    return [
        Entry(label="B", category="People", power=0.5, valence=0.0),
        Entry(label="A", category="People", power=0.5, valence=0.0),
    ]


@pytest.fixture
def triangle_data() -> SelfMapData:
    """Three entries, one dangling association."""
    return SelfMapData(
        entries=(
            Entry("Hub", "People", 0.9, 0.8),
            Entry("Spoke 1", "Accomplishments", 0.4, 0.2),
            Entry("Spoke 2", "Mystery", 0.3, -0.4),
        ),
        associations=(
            Association("Hub", "Spoke 1", "affirms", 1.0),
            Association("Hub", "Spoke 2", "threatens", 1.0),
            Association("Hub", "Ghost", "associates_with", 1.0),
        ),
    )


@pytest.fixture
def view_config() -> ViewConfig:
    return ViewConfig()
