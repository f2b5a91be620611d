"""Shared isolation fixtures for all test suites."""
from __future__ import annotations

import os
import types
from collections.abc import Iterator

import pytest

from cachetck.cluster.instance import InstanceFactory
from cachetck.constants.property_constants import DEFAULT_PROVIDER_PROPERTY, JSR_PROPERTY_KEYS
from cachetck.constants.tool_configs import HarnessConfig, set_config
from cachetck.core import caching

pytest_plugins = ("cachetck.testing.plugin",)

_CONTROLLED_KEYS = JSR_PROPERTY_KEYS + (DEFAULT_PROVIDER_PROPERTY,)
_CLASS_FIXTURES = frozenset({"jsr_server_environment", "jsr_client_environment"})


class FakeEntryPoint:
    """Stand-in for importlib.metadata.EntryPoint."""

    def __init__(self, name: str, target: object, value: str = "") -> None:
        self.name = name
        self.value = value or f"tests.fake:{name}"
        self._target = target

    def load(self) -> object:
        return self._target


@pytest.fixture
def entry_points(monkeypatch) -> dict[str, list[FakeEntryPoint]]:
    """
    Entry points seen by the provider registry, keyed by group. Starts empty;
    tests add FakeEntryPoint objects to simulate installed providers.
    """
    groups: dict[str, list[FakeEntryPoint]] = {}
    fake_metadata = types.SimpleNamespace(entry_points=lambda group: list(groups.get(group, [])))
    monkeypatch.setattr(caching, "_metadata", fake_metadata, raising=True)
    return groups


@pytest.fixture(autouse=True)
def _isolate_process_state(request, monkeypatch, entry_points) -> Iterator[None]:
    """Fresh environment keys, config, provider registry and instance factory per test."""
    # class-scoped environment fixtures are already active and own these keys
    owns_env = not _CLASS_FIXTURES.intersection(request.fixturenames)

    for key in list(os.environ.keys()):
        if key.startswith("CACHETCK_") and not key.startswith("CACHETCK_LOG_"):
            monkeypatch.delenv(key, raising=False)
    if owns_env:
        for key in _CONTROLLED_KEYS:
            monkeypatch.delenv(key, raising=False)

    set_config(HarnessConfig())
    monkeypatch.setattr(caching, "_CACHING_PROVIDERS", caching.CachingProviderRegistry(), raising=True)
    InstanceFactory.terminate_all()

    yield

    InstanceFactory.terminate_all()
    if owns_env:
        for key in _CONTROLLED_KEYS:
            os.environ.pop(key, None)
    set_config(HarnessConfig())
