# tool_configs.py
import os
from dataclasses import dataclass, field

from .logging_constants import env_log_level
from .tool_constants import DEFAULT_PROVIDER_GROUP, ENV_PREFIX


def _default_provider_type() -> str:
    """
    Provider type used when `setup()` is called without one.
    Honors CACHETCK_PROVIDER_TYPE, falling back to 'server'.
    """
    return os.getenv(f"{ENV_PREFIX}PROVIDER_TYPE", "server").strip().lower() or "server"


def _default_provider_group() -> str:
    return os.getenv(f"{ENV_PREFIX}PROVIDER_GROUP", DEFAULT_PROVIDER_GROUP)


@dataclass
class HarnessConfig:
    """
    Global configuration container for the cachetck harness.
    """

    default_provider_type: str = field(default_factory=_default_provider_type)
    provider_group: str = field(default_factory=_default_provider_group)
    log_level: int = field(default_factory=env_log_level)


_GLOBAL: HarnessConfig | None = None


def get_config() -> HarnessConfig:
    """Return the global HarnessConfig, creating it on first use."""
    global _GLOBAL
    if _GLOBAL is None:
        _GLOBAL = HarnessConfig()
    return _GLOBAL


def set_config(cfg: HarnessConfig) -> None:
    """Replace the global HarnessConfig with a custom instance."""
    global _GLOBAL
    _GLOBAL = cfg
