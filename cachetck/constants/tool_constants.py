# tool_constants.py
from __future__ import annotations

# Environment variable prefix used across the project (e.g., CACHETCK_PROVIDER_TYPE)
ENV_PREFIX: str = "CACHETCK_"

# Entry point group scanned for CachingProvider implementations
DEFAULT_PROVIDER_GROUP: str = "cachetck.caching_providers"

# Prefix for generated cluster instance names (e.g., "_cachetck_instance_3")
INSTANCE_NAME_PREFIX: str = "_cachetck_instance_"

REGISTRY_CLEANUP_FAILURE: str = "Could not cleanup CachingProvider registry: [%s] %s"
