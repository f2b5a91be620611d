# core/caching.py
"""
Process-wide registry of caching providers.

Providers are discovered per :class:`ProviderLoader` (an entry point group) and
kept until the process exits. The registry has no public reset on purpose;
test harnesses clear it through :mod:`cachetck.testing.registry_reset`.
"""
from __future__ import annotations

import importlib
from dataclasses import dataclass
from importlib import metadata as _metadata
from threading import RLock

from cachetck.constants.property_constants import DEFAULT_PROVIDER_PROPERTY
from cachetck.logging import get_logger
from cachetck.spi.provider import CachingError, CachingProvider, ErrorCategory

from .config import get_config
from .properties import SystemProperties

logger = get_logger(__name__)
_LOCK = RLock()


@dataclass(frozen=True)
class ProviderLoader:
    """
    Discovers provider classes from one entry point group.

    Loaders compare by group, so two loaders over the same group share
    registry entries.
    """

    group: str

    def load_providers(self) -> list[CachingProvider]:
        providers: list[CachingProvider] = []
        for ep in _metadata.entry_points(group=self.group):
            cls = ep.load()
            providers.append(_instantiate(cls, ep.value))
            logger.debug("Discovered provider %s via entry point '%s'", ep.value, ep.name)
        return providers

    def load_provider(self, name: str) -> CachingProvider:
        """Import ``module.Class`` and instantiate it."""
        module_name, _, attr = name.rpartition(".")
        if not module_name:
            raise CachingError(f"Failed to load the CachingProvider [{name}]", category=ErrorCategory.CONFIGURATION)
        try:
            cls = getattr(importlib.import_module(module_name), attr)
        except (ImportError, AttributeError) as e:
            raise CachingError(
                f"Failed to load the CachingProvider [{name}]: {e}", category=ErrorCategory.CONFIGURATION
            ) from e
        return _instantiate(cls, name)


def _instantiate(cls: type, origin: str) -> CachingProvider:
    provider = cls()
    if not isinstance(provider, CachingProvider):
        raise CachingError(
            f"{origin} does not implement CachingProvider", category=ErrorCategory.CONFIGURATION
        )
    return provider


class CachingProviderRegistry:
    """Providers keyed by loader, then by provider name."""

    def __init__(self) -> None:
        self._caching_providers: dict[ProviderLoader, dict[str, CachingProvider]] = {}
        self._loader: ProviderLoader | None = None

    def get_default_loader(self) -> ProviderLoader:
        with _LOCK:
            if self._loader is None:
                self._loader = ProviderLoader(get_config().provider_group)
            return self._loader

    def set_default_loader(self, loader: ProviderLoader | None) -> None:
        with _LOCK:
            self._loader = loader

    def _providers_for(self, loader: ProviderLoader | None) -> dict[str, CachingProvider]:
        loader = loader or self.get_default_loader()
        with _LOCK:
            providers = self._caching_providers.get(loader)
            if providers is None:
                providers = {p.name: p for p in loader.load_providers()}
                self._caching_providers[loader] = providers
                logger.info("Loaded %d caching provider(s) from '%s'", len(providers), loader.group)
            return providers

    def get_caching_providers(self, loader: ProviderLoader | None = None) -> list[CachingProvider]:
        with _LOCK:
            return list(self._providers_for(loader).values())

    def register(self, provider: CachingProvider, loader: ProviderLoader | None = None) -> None:
        with _LOCK:
            self._providers_for(loader)[provider.name] = provider
        logger.info("Registered caching provider '%s'", provider.name)

    def get_caching_provider(
        self, name: str | None = None, loader: ProviderLoader | None = None
    ) -> CachingProvider:
        """
        Return a provider by name, or the single default provider.

        Raises
        ------
        CachingError
            Category CONFIGURATION when no default can be chosen or `name` cannot be loaded.
        """
        if name is None:
            default_name = SystemProperties().get_property(DEFAULT_PROVIDER_PROPERTY)
            if default_name:
                return self.get_caching_provider(default_name, loader)
            providers = self.get_caching_providers(loader)
            if not providers:
                raise CachingError("No CachingProviders have been configured", category=ErrorCategory.CONFIGURATION)
            if len(providers) > 1:
                raise CachingError(
                    "Multiple CachingProviders have been configured when only a single CachingProvider is expected",
                    category=ErrorCategory.CONFIGURATION,
                )
            return providers[0]

        loader = loader or self.get_default_loader()
        with _LOCK:
            providers = self._providers_for(loader)
            provider = providers.get(name)
            if provider is None:
                loaded = loader.load_provider(name)
                provider = providers.setdefault(loaded.name, loaded)
            return provider


# ----------------------------
# Module-level registry
# ----------------------------

_CACHING_PROVIDERS = CachingProviderRegistry()


def get_default_loader() -> ProviderLoader:
    return _CACHING_PROVIDERS.get_default_loader()


def set_default_loader(loader: ProviderLoader | None) -> None:
    _CACHING_PROVIDERS.set_default_loader(loader)


def get_caching_providers(loader: ProviderLoader | None = None) -> list[CachingProvider]:
    """All providers known to `loader` (default loader if None), discovering them on first use."""
    return _CACHING_PROVIDERS.get_caching_providers(loader)


def get_caching_provider(name: str | None = None, loader: ProviderLoader | None = None) -> CachingProvider:
    return _CACHING_PROVIDERS.get_caching_provider(name, loader)


def register_caching_provider(provider: CachingProvider, loader: ProviderLoader | None = None) -> None:
    """Add a provider instance directly, without going through entry points."""
    _CACHING_PROVIDERS.register(provider, loader)


__all__ = [
    "ProviderLoader",
    "CachingProviderRegistry",
    "get_default_loader",
    "set_default_loader",
    "get_caching_providers",
    "get_caching_provider",
    "register_caching_provider",
]
