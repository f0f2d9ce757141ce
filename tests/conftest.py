from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from lib_log_dispatch.domain.levels import SeverityLevel


class RecordingWriter:
    """Line writer that keeps every call's full argument tuple."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def __call__(self, *values) -> None:
        self.calls.append(values)


@pytest.fixture
def writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=120, color_system=None)


@pytest.fixture(params=list(SeverityLevel), ids=lambda level: level.name)
def any_level(request: pytest.FixtureRequest) -> SeverityLevel:
    return request.param
