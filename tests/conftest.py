import io
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from srtcodecs import Detection  # noqa: E402
from srtformat.logging_helper import bind_stream, set_log_level  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_logging():
    set_log_level("info")
    previous = bind_stream(sys.stderr)
    yield
    set_log_level("info")
    bind_stream(previous)


@pytest.fixture
def log_stream() -> io.StringIO:
    """Collect srtformat log records for the duration of a test."""
    stream = io.StringIO()
    bind_stream(stream)
    return stream


@pytest.fixture
def refusing_classifier():
    def _classify(data: bytes) -> Detection:
        raise AssertionError("classifier must not be consulted")

    return _classify


@pytest.fixture
def fixed_classifier():
    def _factory(label: str, confidence: float, language: str = ""):
        def _classify(data: bytes) -> Detection:
            _classify.seen.append(data)
            return Detection(label=label, confidence=confidence, language=language)

        _classify.seen = []
        return _classify

    return _factory
