from __future__ import annotations

from collections.abc import Callable

import pytest

from cachetck.core.caching import register_caching_provider
from cachetck.spi.provider import CachingProvider


class RecordingProvider(CachingProvider):
    """Provider that counts close() calls and optionally raises from it."""

    def __init__(self, name: str = "recording", error: BaseException | None = None) -> None:
        self._name = name
        self.error = error
        self.close_calls = 0
        self._closed = False

    @property
    def name(self) -> str:
        return f"tests.{self._name}"

    @property
    def is_closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self.close_calls += 1
        if self.error is not None:
            raise self.error
        self._closed = True


@pytest.fixture
def add_provider() -> Callable[..., RecordingProvider]:
    """Register a RecordingProvider in the (isolated) default registry."""

    def _add(name: str, error: BaseException | None = None) -> RecordingProvider:
        provider = RecordingProvider(name, error)
        register_caching_provider(provider)
        return provider

    return _add
