# core/config.py
from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import replace
from threading import RLock
from typing import Any

from cachetck.constants.property_constants import provider_type_of
from cachetck.constants.tool_configs import HarnessConfig
from cachetck.constants.tool_configs import get_config as _get_config
from cachetck.constants.tool_configs import set_config as _set_config
from cachetck.constants.logging_constants import LOG_DEFAULT_LEVEL, LOG_LEVEL_MAP
from cachetck.logging import get_logger, set_global_level

_LOG = get_logger(__name__)
_LOCK = RLock()


def get_config() -> HarnessConfig:
    """
    Return the global HarnessConfig managed by cachetck.constants.tool_configs.
    """
    with _LOCK:
        return _get_config()


def update_config(**overrides: Any) -> HarnessConfig:
    """
    Replace selected fields of the global configuration.

    Unknown field names raise TypeError. ``default_provider_type`` is validated
    and stored in its lowercase textual form. ``log_level`` accepts a name or a
    number and is applied to the package logger right away.
    """
    if "default_provider_type" in overrides:
        overrides["default_provider_type"] = provider_type_of(overrides["default_provider_type"]).value
    if isinstance(overrides.get("log_level"), str):
        overrides["log_level"] = LOG_LEVEL_MAP.get(overrides["log_level"].upper(), LOG_DEFAULT_LEVEL)
    with _LOCK:
        new_cfg = replace(_get_config(), **overrides)
        _set_config(new_cfg)
    if "log_level" in overrides:
        set_global_level(new_cfg.log_level)
    _LOG.debug("Configuration updated: %s", ", ".join(sorted(overrides)))
    return new_cfg


@contextmanager
def temporary_config(**overrides: Any) -> Generator[HarnessConfig, None, None]:
    """
    Temporarily override configuration fields (useful for tests).

    Example
    -------
    >>> with temporary_config(default_provider_type="client"):
    ...     pass
    """
    with _LOCK:
        previous = _get_config()
    try:
        yield update_config(**overrides)
    finally:
        with _LOCK:
            _set_config(previous)
        if "log_level" in overrides:
            set_global_level(previous.log_level)


__all__ = ["get_config", "update_config", "temporary_config", "HarnessConfig"]
