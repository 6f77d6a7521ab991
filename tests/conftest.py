"""Shared fixtures."""

from __future__ import annotations

import pytest


class RecordingSurface:
    """Surface stand-in that records every call as (method, args)."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple]] = []

    def __getattr__(self, name: str):
        def record(*args):
            self.calls.append((name, args))
        return record

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()
