# spi/provider.py
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Mapping

# ----------------------------
# Exceptions
# ----------------------------


class ErrorCategory(str, Enum):
    """Tag carried by caching errors so callers can match on kind, not on class."""
    INSTANCE_NOT_ACTIVE = "instance_not_active"
    CONFIGURATION = "configuration"
    PROVIDER = "provider"


class CachingError(Exception):
    """Base error for caching providers and the provider registry."""

    category: ErrorCategory = ErrorCategory.PROVIDER

    def __init__(self, message: str = "", *, category: ErrorCategory | None = None) -> None:
        super().__init__(message)
        if category is not None:
            self.category = category


class InstanceNotActiveError(CachingError):
    """Raised when an operation needs a cluster instance that is no longer running."""

    category = ErrorCategory.INSTANCE_NOT_ACTIVE


def is_ignorable_close_error(exc: BaseException) -> bool:
    """
    Return True if `exc` only says the backing instance is already gone.

    Matches on the ``category`` attribute, so errors from other packages that
    carry the same tag are treated alike.
    """
    category = getattr(exc, "category", None)
    if category is None:
        return False
    try:
        return ErrorCategory(category) is ErrorCategory.INSTANCE_NOT_ACTIVE
    except ValueError:
        return False


# ----------------------------
# Provider interface
# ----------------------------


class CachingProvider(ABC):
    """
    Factory for cache managers, registered process-wide in
    :class:`cachetck.core.caching.Caching`.

    Implementations must be constructible without arguments so that the
    registry can load them from entry points or by class name.
    """

    @property
    def name(self) -> str:
        """Fully qualified class name; the registry key for this provider."""
        cls = type(self)
        return f"{cls.__module__}.{cls.__qualname__}"

    @property
    def default_properties(self) -> Mapping[str, str]:
        return {}

    @property
    @abstractmethod
    def is_closed(self) -> bool:
        ...

    @abstractmethod
    def close(self) -> None:
        """Release everything this provider created. Must be safe to call twice."""
