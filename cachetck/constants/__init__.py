"""
Public constants API for cachetck.constants.

This module re-exports selected names to provide a clean and stable surface.
"""

from .logging_constants import (
    LOG_DEFAULT_BACKUPS,
    LOG_DEFAULT_JSON,
    LOG_DEFAULT_LEVEL,
    LOG_DEFAULT_MAX_BYTES,
    LOG_DEFAULT_NAME,
    LOG_DEFAULT_STDERR,
    LOG_ENV_PREFIX,
    LOG_LEVEL_MAP,
    env_log_json,
    env_log_level,
    env_log_stderr,
)
from .property_constants import (
    CACHE_ENTRY_PROPERTY,
    CACHE_INVOCATION_CONTEXT_PROPERTY,
    CACHE_MANAGER_IMPL_PROPERTY,
    CACHE_PROPERTY,
    DEFAULT_PROVIDER_PROPERTY,
    JSR_PROPERTY_KEYS,
    MANAGEMENT_AGENT_ID_PROPERTY,
    MBEAN_BUILDER_PROPERTY,
    PROVIDER_TYPE_PROPERTY,
    ProviderType,
    jsr_properties,
    provider_type_of,
)
from .tool_configs import HarnessConfig, get_config, set_config
from .tool_constants import (
    DEFAULT_PROVIDER_GROUP,
    ENV_PREFIX,
    INSTANCE_NAME_PREFIX,
    REGISTRY_CLEANUP_FAILURE,
)

__all__ = [
    # tool_constants
    "ENV_PREFIX",
    "DEFAULT_PROVIDER_GROUP",
    "INSTANCE_NAME_PREFIX",
    "REGISTRY_CLEANUP_FAILURE",
    # property_constants
    "ProviderType",
    "PROVIDER_TYPE_PROPERTY",
    "DEFAULT_PROVIDER_PROPERTY",
    "MBEAN_BUILDER_PROPERTY",
    "CACHE_MANAGER_IMPL_PROPERTY",
    "CACHE_PROPERTY",
    "CACHE_ENTRY_PROPERTY",
    "MANAGEMENT_AGENT_ID_PROPERTY",
    "CACHE_INVOCATION_CONTEXT_PROPERTY",
    "JSR_PROPERTY_KEYS",
    "jsr_properties",
    "provider_type_of",
    # tool_configs
    "HarnessConfig",
    "get_config",
    "set_config",
    # logging_constants
    "LOG_ENV_PREFIX",
    "LOG_DEFAULT_NAME",
    "LOG_DEFAULT_LEVEL",
    "LOG_DEFAULT_JSON",
    "LOG_DEFAULT_STDERR",
    "LOG_DEFAULT_MAX_BYTES",
    "LOG_DEFAULT_BACKUPS",
    "LOG_LEVEL_MAP",
    "env_log_level",
    "env_log_json",
    "env_log_stderr",
]
