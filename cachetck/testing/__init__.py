from __future__ import annotations

from .environment import (
    EnvironmentSession,
    cleanup,
    clear_caching_provider_registry,
    jsr_environment,
    setup,
    shutdown_instances,
)
from .registry_reset import RegistryResetter, ReflectiveRegistryReset, default_resetter

__all__ = [
    "EnvironmentSession",
    "setup",
    "cleanup",
    "jsr_environment",
    "clear_caching_provider_registry",
    "shutdown_instances",
    "RegistryResetter",
    "ReflectiveRegistryReset",
    "default_resetter",
]
