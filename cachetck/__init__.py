# cachetck/__init__.py
from __future__ import annotations

from importlib import metadata as _metadata

"""
cachetck public package surface.

Re-exports the provider registry, configuration and property helpers so that
users can:
    import cachetck as ct
    ct.get_caching_providers()
    ct.jsr_properties("client")
    ct.get_config()

The test environment helpers live in :mod:`cachetck.testing` (they depend on pytest).
"""

try:
    __version__ = _metadata.version("cachetck")
except _metadata.PackageNotFoundError:  # local dev / not installed
    __version__ = "0.0.1-dev"

from .constants.property_constants import ProviderType, jsr_properties  # noqa: E402
from .core import (  # noqa: E402
    ProviderLoader,
    SystemProperties,
    get_caching_provider,
    get_caching_providers,
    get_config,
    register_caching_provider,
    temporary_config,
)
from .spi import CachingError, CachingProvider, ErrorCategory, InstanceNotActiveError  # noqa: E402

__all__ = [
    "__version__",
    "ProviderType",
    "jsr_properties",
    "SystemProperties",
    "ProviderLoader",
    "get_caching_providers",
    "get_caching_provider",
    "register_caching_provider",
    "get_config",
    "temporary_config",
    "CachingProvider",
    "CachingError",
    "ErrorCategory",
    "InstanceNotActiveError",
]
