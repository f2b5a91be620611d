from __future__ import annotations

from .instance import ClusterInstance, InstanceFactory, LifecycleState, new_instance, shutdown_all
from .provider import ClusterCachingProvider

__all__ = [
    "ClusterInstance",
    "InstanceFactory",
    "LifecycleState",
    "new_instance",
    "shutdown_all",
    "ClusterCachingProvider",
]
