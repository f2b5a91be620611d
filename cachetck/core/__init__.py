# core/__init__.py
from __future__ import annotations

from .caching import (
    CachingProviderRegistry,
    ProviderLoader,
    get_caching_provider,
    get_caching_providers,
    get_default_loader,
    register_caching_provider,
    set_default_loader,
)
from .config import get_config, temporary_config, update_config
from .properties import SystemProperties

__all__ = [
    # config
    "get_config",
    "update_config",
    "temporary_config",
    # properties
    "SystemProperties",
    # provider registry
    "ProviderLoader",
    "CachingProviderRegistry",
    "get_default_loader",
    "set_default_loader",
    "get_caching_providers",
    "get_caching_provider",
    "register_caching_provider",
]
