# cluster/instance.py
from __future__ import annotations

import itertools
from enum import Enum
from threading import RLock

from cachetck.constants.tool_constants import INSTANCE_NAME_PREFIX
from cachetck.logging import get_logger
from cachetck.spi.provider import InstanceNotActiveError

logger = get_logger(__name__)
_LOCK = RLock()


class LifecycleState(str, Enum):
    running = "running"
    shut_down = "shut_down"
    terminated = "terminated"


class ClusterInstance:
    """
    A member of the compute cluster under test.

    Instances are created through :class:`InstanceFactory` so that the factory
    can find and stop them again.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._state = LifecycleState.running

    def __repr__(self) -> str:
        return f"ClusterInstance(name={self.name!r}, state={self._state.value})"

    @property
    def state(self) -> LifecycleState:
        return self._state

    def is_running(self) -> bool:
        return self._state is LifecycleState.running

    def ensure_active(self) -> None:
        """Raise InstanceNotActiveError unless the instance is running."""
        if not self.is_running():
            raise InstanceNotActiveError(f"Instance '{self.name}' is not active ({self._state.value})")

    def shutdown(self) -> None:
        """Graceful stop; no-op if already stopped."""
        if self.is_running():
            self._state = LifecycleState.shut_down
            logger.info("Instance '%s' shut down", self.name)
        InstanceFactory._remove(self)

    def terminate(self) -> None:
        """Immediate stop without the graceful part."""
        if self._state is not LifecycleState.terminated:
            self._state = LifecycleState.terminated
            logger.debug("Instance '%s' terminated", self.name)
        InstanceFactory._remove(self)


class InstanceFactory:
    """Process-wide book of running cluster instances."""

    _INSTANCE_MAP: dict[str, ClusterInstance] = {}
    _NAME_COUNTER = itertools.count(1)

    @classmethod
    def new_instance(cls, name: str | None = None) -> ClusterInstance:
        """
        Start a new instance.

        Raises
        ------
        ValueError
            If a running instance already uses `name`.
        """
        with _LOCK:
            if name is None:
                name = f"{INSTANCE_NAME_PREFIX}{next(cls._NAME_COUNTER)}"
            if name in cls._INSTANCE_MAP:
                raise ValueError(f"An instance named '{name}' is already running")
            instance = ClusterInstance(name)
            cls._INSTANCE_MAP[name] = instance
        logger.info("Instance '%s' started", name)
        return instance

    @classmethod
    def get_instance(cls, name: str) -> ClusterInstance | None:
        with _LOCK:
            return cls._INSTANCE_MAP.get(name)

    @classmethod
    def get_all_instances(cls) -> list[ClusterInstance]:
        with _LOCK:
            return list(cls._INSTANCE_MAP.values())

    @classmethod
    def shutdown_all(cls) -> None:
        instances = cls.get_all_instances()
        for instance in instances:
            instance.shutdown()
        if instances:
            logger.info("Shut down %d instance(s)", len(instances))

    @classmethod
    def terminate_all(cls) -> None:
        """Terminate every instance and reset factory state (name counter included)."""
        for instance in cls.get_all_instances():
            instance.terminate()
        with _LOCK:
            cls._INSTANCE_MAP.clear()
            cls._NAME_COUNTER = itertools.count(1)
        logger.debug("Instance factory state reset")

    @classmethod
    def _remove(cls, instance: ClusterInstance) -> None:
        with _LOCK:
            if cls._INSTANCE_MAP.get(instance.name) is instance:
                del cls._INSTANCE_MAP[instance.name]


def new_instance(name: str | None = None) -> ClusterInstance:
    return InstanceFactory.new_instance(name)


def shutdown_all() -> None:
    """Gracefully shut down every running instance in this process."""
    InstanceFactory.shutdown_all()
