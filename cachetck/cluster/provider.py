# cluster/provider.py
from __future__ import annotations

from typing import Mapping

from cachetck.constants.property_constants import PROVIDER_TYPE_PROPERTY, ProviderType, provider_type_of
from cachetck.core.properties import SystemProperties
from cachetck.logging import get_logger
from cachetck.spi.provider import CachingProvider

from .instance import ClusterInstance, InstanceFactory

logger = get_logger(__name__)


class ClusterCachingProvider(CachingProvider):
    """
    Caching provider backed by a cluster instance.

    Parameters
    ----------
    instance : ClusterInstance, optional
        Instance to bind to. If None, one is started on first use and owned by
        this provider, which then shuts it down on close.
    properties : SystemProperties, optional
        Where the provider type selector is read from.
    """

    def __init__(
        self,
        instance: ClusterInstance | None = None,
        properties: SystemProperties | None = None,
    ) -> None:
        self._properties = properties or SystemProperties()
        self._instance = instance
        self._owns_instance = False
        self._closed = False

    @property
    def provider_type(self) -> ProviderType:
        """Server unless the provider type property says client."""
        raw = self._properties.get_property(PROVIDER_TYPE_PROPERTY)
        return provider_type_of(raw) if raw else ProviderType.server

    @property
    def default_properties(self) -> Mapping[str, str]:
        return {PROVIDER_TYPE_PROPERTY: self.provider_type.value}

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def instance(self) -> ClusterInstance:
        if self._instance is None:
            self._instance = InstanceFactory.new_instance()
            self._owns_instance = True
            logger.debug("%s provider started its own instance '%s'", self.provider_type.value, self._instance.name)
        return self._instance

    def close(self) -> None:
        """
        Close the provider.

        Raises InstanceNotActiveError when the bound instance was stopped
        before the provider got closed.
        """
        if self._closed:
            return
        if self._instance is not None:
            self._instance.ensure_active()
            if self._owns_instance:
                self._instance.shutdown()
        self._closed = True
        logger.debug("Closed provider %s", self.name)
