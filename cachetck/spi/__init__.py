from __future__ import annotations

from .provider import (
    CachingError,
    CachingProvider,
    ErrorCategory,
    InstanceNotActiveError,
    is_ignorable_close_error,
)

__all__ = [
    "CachingProvider",
    "CachingError",
    "ErrorCategory",
    "InstanceNotActiveError",
    "is_ignorable_close_error",
]
