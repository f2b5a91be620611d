# core/properties.py
from __future__ import annotations

import os
from collections.abc import Iterable, MutableMapping

from cachetck.logging import get_logger

logger = get_logger(__name__)


class SystemProperties:
    """
    Process-wide string key/value settings read by caching providers at startup.

    Backed by ``os.environ`` unless another mutable mapping is given, which
    keeps tests away from the real environment when they want to.
    """

    def __init__(self, store: MutableMapping[str, str] | None = None) -> None:
        self._store: MutableMapping[str, str] = os.environ if store is None else store

    @property
    def store(self) -> MutableMapping[str, str]:
        return self._store

    def has_property(self, key: str) -> bool:
        return key in self._store

    def get_property(self, key: str, default: str | None = None) -> str | None:
        return self._store.get(key, default)

    def set_property(self, key: str, value: str) -> None:
        self._store[key] = str(value)
        logger.debug("Set property %s=%s", key, value)

    def clear_property(self, key: str) -> str | None:
        """Remove `key` and return its previous value (None if it was absent)."""
        previous = self._store.pop(key, None)
        if previous is not None:
            logger.debug("Cleared property %s", key)
        return previous

    def snapshot(self, keys: Iterable[str]) -> dict[str, str | None]:
        """Current value (or None) for each key, in the order given."""
        return {k: self._store.get(k) for k in keys}
