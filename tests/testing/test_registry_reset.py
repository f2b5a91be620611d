from __future__ import annotations

import types

import pytest

from cachetck.core import caching
from cachetck.core.caching import CachingProviderRegistry, ProviderLoader
from cachetck.testing.registry_reset import ReflectiveRegistryReset, RegistryResetter, default_resetter


def test_default_resetter_targets_module_registry(add_provider):
    add_provider("x")
    registry = caching._CACHING_PROVIDERS
    assert registry._loader is not None

    default_resetter().reset_registry()

    assert registry._caching_providers == {}
    assert registry._loader is None


def test_reset_works_on_any_owner():
    registry = CachingProviderRegistry()
    registry._caching_providers[ProviderLoader("g")] = {}
    registry.set_default_loader(ProviderLoader("g"))
    holder = types.SimpleNamespace(REG=registry)

    ReflectiveRegistryReset(owner=holder, registry_attr="REG").reset_registry()

    assert registry._caching_providers == {}
    assert registry._loader is None


@pytest.mark.parametrize(
    "kwargs, missing",
    [
        ({"registry_attr": "_GONE"}, "_GONE"),
        ({"providers_attr": "_providers_v2"}, "_providers_v2"),
        ({"loader_attr": "_class_loader"}, "_class_loader"),
    ],
)
def test_missing_attribute_raises_attribute_error(kwargs, missing):
    with pytest.raises(AttributeError, match=missing):
        ReflectiveRegistryReset(**kwargs).reset_registry()


def test_provider_map_without_clear_raises():
    registry = types.SimpleNamespace(_caching_providers=(), _loader=None)
    holder = types.SimpleNamespace(_CACHING_PROVIDERS=registry)

    with pytest.raises(AttributeError, match="clear"):
        ReflectiveRegistryReset(owner=holder).reset_registry()


def test_lookup_does_not_fall_back_to_getattr():
    class Dynamic:
        def __getattr__(self, item):
            return {}

    holder = types.SimpleNamespace(_CACHING_PROVIDERS=Dynamic())
    with pytest.raises(AttributeError, match="_caching_providers"):
        ReflectiveRegistryReset(owner=holder).reset_registry()


def test_protocol_accepts_custom_resetters():
    class FirstClassReset:
        calls = 0

        def reset_registry(self) -> None:
            FirstClassReset.calls += 1

    assert isinstance(FirstClassReset(), RegistryResetter)
    assert isinstance(ReflectiveRegistryReset(), RegistryResetter)
