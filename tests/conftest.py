"""Shared pytest configuration for code_intel_capability tests.

Makes `fixtures` importable from test modules and exposes the mocks as
pytest fixtures.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Tuple

import pytest

TESTS_DIR = Path(__file__).parent
if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

from fixtures.mocks import MockChatCapability, StaticModelIdResolver  # noqa: E402


class RecordingLogger:
    """LoggerProtocol implementation that keeps every event in memory."""

    def __init__(self):
        self.events: List[Tuple[str, str, Dict[str, Any]]] = []

    def _record(self, level: str, event: str, **kwargs: Any) -> None:
        self.events.append((level, event, kwargs))

    def debug(self, event: str, **kwargs: Any) -> None:
        self._record("debug", event, **kwargs)

    def info(self, event: str, **kwargs: Any) -> None:
        self._record("info", event, **kwargs)

    def warning(self, event: str, **kwargs: Any) -> None:
        self._record("warning", event, **kwargs)

    def error(self, event: str, **kwargs: Any) -> None:
        self._record("error", event, **kwargs)

    def bind(self, **kwargs: Any) -> "RecordingLogger":
        return self

    def names(self, level: str = None) -> List[str]:
        return [name for lvl, name, _ in self.events if level is None or lvl == level]


@pytest.fixture
def mock_chat():
    """Chat capability returning a full semantics document."""
    return MockChatCapability()


@pytest.fixture
def model_resolver():
    """Deterministic model-id resolver."""
    return StaticModelIdResolver()


@pytest.fixture
def recording_logger():
    """In-memory structured logger."""
    return RecordingLogger()
