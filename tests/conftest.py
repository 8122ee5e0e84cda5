"""Pytest configuration and shared fixtures."""
import json

import pytest

from chatscroll.history import ChatMessage, HistoryState


@pytest.fixture
def make_message():
    """Return a factory for chat messages with sequential ids."""
    counter = {"n": 0}

    def _make(username: str = "alice", content: str = "hi", timestamp: int | None = None,
              uuid: str | None = None) -> ChatMessage:
        counter["n"] += 1
        return ChatMessage(
            uuid=uuid or f"msg-{counter['n']}",
            username=username,
            content=content,
            timestamp=counter["n"] if timestamp is None else timestamp,
        )

    return _make


@pytest.fixture
def state():
    """Return an empty history state."""
    return HistoryState()


@pytest.fixture
def three_messages(make_message):
    """Return the alice/bob/carol conversation in send order."""
    return [
        make_message("alice", "hi", timestamp=1),
        make_message("bob", "yo", timestamp=2),
        make_message("carol", "sup", timestamp=3),
    ]


@pytest.fixture
def history_file(tmp_path):
    """Create a JSON Lines history file, written out of timestamp order."""
    path = tmp_path / "history.jsonl"
    lines = [
        {"UUID": "b", "Username": "bob", "Content": "yo", "Timestamp": 2},
        {"UUID": "a", "Username": "alice", "Content": "hi", "Timestamp": 1},
        {"uuid": "c", "username": "carol", "content": "sup", "timestamp": 3},
    ]
    path.write_text("\n".join(json.dumps(line) for line in lines) + "\n\n")
    return path
