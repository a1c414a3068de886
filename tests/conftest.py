from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Dict, List

import pytest

from textanalyzer.config.settings import Settings
from textanalyzer.utils.logging import SimpleLogger


@pytest.fixture(autouse=True)
def quiet_logger():
    SimpleLogger.set_enabled(False)
    yield
    SimpleLogger.set_enabled(True)
    SimpleLogger.set_level("DEBUG")


@pytest.fixture(autouse=True)
def fresh_settings():
    Settings.clear()
    yield
    Settings.clear()


class FakeCompletions:
    """Stands in for `OpenAI().chat.completions`; records every call."""

    def __init__(self, reply: Any = None, error: Exception | None = None, choices: bool = True) -> None:
        self.reply = reply
        self.error = error
        self.choices = choices
        self.calls: List[Dict[str, Any]] = []

    def create(self, **kwargs: Any) -> SimpleNamespace:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        if not self.choices:
            return SimpleNamespace(choices=[])
        message = SimpleNamespace(role="assistant", content=self.reply)
        return SimpleNamespace(choices=[SimpleNamespace(index=0, message=message)])


def make_fake_client(**kwargs: Any) -> SimpleNamespace:
    completions = FakeCompletions(**kwargs)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


@pytest.fixture
def fake_client():
    return make_fake_client
