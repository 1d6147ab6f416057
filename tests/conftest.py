"""Shared test fixtures."""

import asyncio
from typing import Optional

import pytest


class FakeProvider:
    """Stand-in for GroqProvider that returns canned content or raises."""

    def __init__(self, content: Optional[str] = None, error: Optional[Exception] = None):
        self.content = content
        self.error = error
        self.prompts: list[str] = []
        self.closed = False

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return self.content

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_provider():
    """Factory for FakeProvider instances."""
    return FakeProvider
