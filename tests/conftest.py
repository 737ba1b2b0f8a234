# tests/conftest.py — v1
"""Shared test fixtures for all unit and integration tests.

Provides a controllable clock, sample documents, metadata and an
in-memory store. No external services — everything runs in process.
"""

from __future__ import annotations

import pytest

from smartcontext.cache.memory_store import MemoryStore
from smartcontext.core.models import DocumentContext, ProjectContext


class FakeClock:
    """Manually advanced epoch-seconds clock."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# === FIXTURES: Infrastructure ===


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


# === FIXTURES: Sample documents ===


@pytest.fixture
def markdown_document() -> str:
    """Headed markdown of ~1200 words (medium-doc by character length)."""
    body = " ".join(["lorem"] * 1200)
    return f"# Intro\n\n{body}\n\n## Setup\n\nInstall it.\n\n## Results\n\nIt works."


@pytest.fixture
def fiction_document() -> str:
    """Dialogue-heavy prose whose only capitalized words are two names."""
    lines = [
        '"hello," said Sarah.',
        '"hi there," said John.',
        '"where are you going?"',
        '"to the market."',
        '"may I come along?"',
        '"of course."',
        '"wonderful," said Sarah.',
    ]
    return "\n\n".join(lines)


@pytest.fixture
def technical_document() -> str:
    return (
        "# API Guide\n\n"
        "Call `connect()` before `query()`.\n\n"
        "```python\nclient = connect()\n```\n\n"
        "```python\nclient.query('x')\n```\n"
    )


# === FIXTURES: Metadata ===


@pytest.fixture
def project_context() -> ProjectContext:
    return ProjectContext(
        name="Atlas",
        description="A field guide to mountain huts.",
        style="concise",
        audience="hikers",
    )


@pytest.fixture
def document_context() -> DocumentContext:
    return DocumentContext(file_id="doc-1", purpose="Chapter draft", status="review")
