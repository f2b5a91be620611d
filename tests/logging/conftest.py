from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from cachetck.logging import reset_logging


@pytest.fixture(autouse=True)
def clean_env_and_reset(monkeypatch) -> Iterator[None]:
    """Reset the package logger and drop CACHETCK_LOG_* variables between tests."""
    for key in list(os.environ.keys()):
        if key.startswith("CACHETCK_LOG_"):
            monkeypatch.delenv(key, raising=False)

    reset_logging("cachetck")
    yield
    reset_logging("cachetck")
