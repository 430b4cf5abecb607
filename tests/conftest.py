"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Provide a recording fake rewrite function
  - Provide default settings and environment-backed Config

Notes:
  - No test talks to a real provider
"""

import asyncio
from typing import Dict, List, Optional, Tuple

import pytest

from src.config.config import Config
from src.models.api_models import HumanizeSettings


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "api: API endpoint tests using FastAPI TestClient"
    )


class FakeRewriter:
    """Records every call; fails or delays for configured inputs."""

    def __init__(
        self,
        failures: Optional[Dict[str, Exception]] = None,
        delays: Optional[Dict[str, float]] = None,
    ):
        self.failures = failures or {}
        self.delays = delays or {}
        self.calls: List[Tuple[str, HumanizeSettings, bool]] = []
        self.completion_order: List[str] = []

    async def rewrite(self, text: str, settings: HumanizeSettings, is_partial: bool) -> str:
        self.calls.append((text, settings, is_partial))
        await asyncio.sleep(self.delays.get(text, 0))
        if text in self.failures:
            raise self.failures[text]
        self.completion_order.append(text)
        return f"<{text[:10]}>"

    def ensure_configured(self, settings: HumanizeSettings) -> None:
        pass


@pytest.fixture
def settings() -> HumanizeSettings:
    return HumanizeSettings()


@pytest.fixture
def fake_rewriter() -> FakeRewriter:
    return FakeRewriter()


@pytest.fixture
def config(monkeypatch) -> Config:
    monkeypatch.setenv("GROQ_API_KEY", "test-groq-key")
    monkeypatch.setenv("GEMINI_API_KEY", "test-gemini-key")
    monkeypatch.setenv("ADMIN_CODE", "secret")
    monkeypatch.setenv("CHUNK_THRESHOLD", "2500")
    monkeypatch.setenv("QUOTA_ENABLED", "true")
    return Config()
