"""
Fake generation provider clients for tests.

Author: @kcaparas1630
"""

from types import SimpleNamespace
from typing import Optional


class FakeCompletions:
    """Stands in for client.chat.completions; records every call."""

    def __init__(self, text: Optional[str] = None, error: Optional[Exception] = None):
        self.text = text
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.text)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeAIClient:
    def __init__(self, text: Optional[str] = None, error: Optional[Exception] = None):
        self.completions = FakeCompletions(text=text, error=error)
        self.chat = SimpleNamespace(completions=self.completions)
        self.closed = False

    async def close(self):
        self.closed = True
