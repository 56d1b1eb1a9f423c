"""
Pytest Configuration

Shared fixtures for the grammar quiz grader test suite.
"""

import sys
from pathlib import Path
from typing import List

import httpx
import pytest
from fastapi.testclient import TestClient

# Make the server package importable without installing it
sys.path.insert(0, str(Path(__file__).parent.parent / "server"))

from grammar_quiz.answer_key import ANSWER_KEY, TOTAL_QUESTIONS
from grammar_quiz.main import app
from grammar_quiz.services import notifier as notifier_module
from grammar_quiz.services.notifier import TelegramNotifier


class RecordingNotifier:
    """Stands in for the Telegram notifier and keeps every report it is given."""

    def __init__(self):
        self.sent: List[str] = []

    async def send(self, text: str) -> bool:
        self.sent.append(text)
        return True


@pytest.fixture
def client():
    """FastAPI test client with startup/shutdown events run."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def recording_notifier(monkeypatch):
    """Replace the global notifier with one that records reports."""
    recorder = RecordingNotifier()
    monkeypatch.setattr(notifier_module, "notifier", recorder)
    return recorder


@pytest.fixture
def unreachable_notifier(monkeypatch):
    """Replace the global notifier with a configured one whose network always fails."""
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        raise httpx.ConnectError("Connection refused", request=request)

    failing = TelegramNotifier(
        bot_token="test-token",
        chat_id="12345",
        transport=httpx.MockTransport(handler),
    )
    monkeypatch.setattr(notifier_module, "notifier", failing)
    return calls


@pytest.fixture
def perfect_answers():
    """First accepted variant for every question."""
    return {f"q{i}": ANSWER_KEY[i][0] for i in range(1, TOTAL_QUESTIONS + 1)}


@pytest.fixture
def submission():
    """Valid submission with only the first question answered."""
    return {
        "name": "Aziza Karimova",
        "group": "B1-07",
        "answers": {"q1": "had already cooked"},
    }
