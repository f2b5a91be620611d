# property_constants.py
from __future__ import annotations

from enum import Enum


class ProviderType(str, Enum):
    """Caching provider flavour selected for a compliance run."""
    server = "server"
    client = "client"


# Selects a client or server CachingProvider. Without it the provider guesses from
# what is importable, which picks the client flavour when both are on the path.
PROVIDER_TYPE_PROPERTY: str = "hazelcast.jcache.provider.type"

# Read by Caching to choose the default provider when several are registered
DEFAULT_PROVIDER_PROPERTY: str = "javax.cache.spi.CachingProvider"

MBEAN_BUILDER_PROPERTY: str = "javax.management.builder.initial"
CACHE_MANAGER_IMPL_PROPERTY: str = "CacheManagerImpl"
CACHE_PROPERTY: str = "javax.cache.Cache"
CACHE_ENTRY_PROPERTY: str = "javax.cache.Cache.Entry"
MANAGEMENT_AGENT_ID_PROPERTY: str = "org.jsr107.tck.management.agentId"
CACHE_INVOCATION_CONTEXT_PROPERTY: str = "javax.cache.annotation.CacheInvocationContext"

# Plain strings: the compliance suite resolves these names itself
_FIXED_PROPERTIES: tuple[tuple[str, str], ...] = (
    (MBEAN_BUILDER_PROPERTY, "com.hazelcast.cache.impl.TCKMBeanServerBuilder"),
    (CACHE_MANAGER_IMPL_PROPERTY, "com.hazelcast.cache.HazelcastCacheManager"),
    (CACHE_PROPERTY, "com.hazelcast.cache.ICache"),
    (CACHE_ENTRY_PROPERTY, "com.hazelcast.cache.impl.CacheEntry"),
    (MANAGEMENT_AGENT_ID_PROPERTY, "TCKMbeanServer"),
    (
        CACHE_INVOCATION_CONTEXT_PROPERTY,
        "javax.cache.annotation.impl.cdi.CdiCacheKeyInvocationContextImpl",
    ),
)

JSR_PROPERTY_KEYS: tuple[str, ...] = (PROVIDER_TYPE_PROPERTY,) + tuple(k for k, _ in _FIXED_PROPERTIES)


def provider_type_of(value: ProviderType | str) -> ProviderType:
    """
    Coerce a textual provider type into :class:`ProviderType`.

    Raises
    ------
    ValueError
        If `value` is neither "server" nor "client".
    """
    if isinstance(value, ProviderType):
        return value
    try:
        return ProviderType(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(p.value for p in ProviderType)
        raise ValueError(f"Unknown provider type {value!r}. Allowed: {allowed}") from None


def jsr_properties(provider_type: ProviderType | str = ProviderType.server) -> dict[str, str]:
    """
    Return the ordered key/value map applied before a compliance test class.

    Parameters
    ----------
    provider_type : {"server", "client"}
        Only the provider type selector differs between the two variants.

    Returns
    -------
    dict[str, str]
        Fresh dict in the order the keys are applied.
    """
    ptype = provider_type_of(provider_type)
    props = {PROVIDER_TYPE_PROPERTY: ptype.value}
    props.update(_FIXED_PROPERTIES)
    return props
