from __future__ import annotations

import logging
import os

import pytest

from cachetck.constants.property_constants import (
    JSR_PROPERTY_KEYS,
    PROVIDER_TYPE_PROPERTY,
    ProviderType,
    jsr_properties,
    provider_type_of,
)
from cachetck.core.config import get_config, temporary_config, update_config
from cachetck.core.properties import SystemProperties


def test_property_map_contents():
    props = jsr_properties("server")
    assert tuple(props) == JSR_PROPERTY_KEYS
    assert props[PROVIDER_TYPE_PROPERTY] == "server"
    assert props["javax.management.builder.initial"] == "com.hazelcast.cache.impl.TCKMBeanServerBuilder"
    assert props["CacheManagerImpl"] == "com.hazelcast.cache.HazelcastCacheManager"
    assert props["javax.cache.Cache"] == "com.hazelcast.cache.ICache"
    assert props["javax.cache.Cache.Entry"] == "com.hazelcast.cache.impl.CacheEntry"
    assert props["org.jsr107.tck.management.agentId"] == "TCKMbeanServer"
    assert (
        props["javax.cache.annotation.CacheInvocationContext"]
        == "javax.cache.annotation.impl.cdi.CdiCacheKeyInvocationContextImpl"
    )


def test_property_map_is_a_fresh_copy():
    props = jsr_properties(ProviderType.client)
    props.clear()
    assert jsr_properties("client")[PROVIDER_TYPE_PROPERTY] == "client"


@pytest.mark.parametrize("raw, expected", [("server", ProviderType.server), (" Client ", ProviderType.client)])
def test_provider_type_coercion(raw, expected):
    assert provider_type_of(raw) is expected


def test_provider_type_rejects_unknown():
    with pytest.raises(ValueError, match="Allowed: server, client"):
        provider_type_of("member")


def test_system_properties_default_to_environ(monkeypatch):
    props = SystemProperties()
    assert props.store is os.environ

    props.set_property("CACHETCK_TEST_KEY", "v")
    try:
        assert props.has_property("CACHETCK_TEST_KEY")
        assert props.get_property("CACHETCK_TEST_KEY") == "v"
    finally:
        assert props.clear_property("CACHETCK_TEST_KEY") == "v"
    assert not props.has_property("CACHETCK_TEST_KEY")


def test_system_properties_on_mapping():
    store = {"a": "1"}
    props = SystemProperties(store)
    assert props.clear_property("missing") is None
    props.set_property("b", 2)  # type: ignore[arg-type]
    assert store == {"a": "1", "b": "2"}
    assert props.snapshot(["b", "c", "a"]) == {"b": "2", "c": None, "a": "1"}


def test_temporary_config_restores_previous():
    original = get_config()
    with temporary_config(default_provider_type=ProviderType.client) as cfg:
        assert cfg.default_provider_type == "client"
        assert get_config() is cfg
    assert get_config() is original


def test_update_config_validates_provider_type():
    with pytest.raises(ValueError):
        update_config(default_provider_type="nope")
    with pytest.raises(TypeError):
        update_config(no_such_field=1)


def test_log_level_override_reaches_package_logger():
    pkg_logger = logging.getLogger("cachetck")
    previous = get_config().log_level

    with temporary_config(log_level="debug") as cfg:
        assert cfg.log_level == logging.DEBUG
        assert pkg_logger.level == logging.DEBUG
        assert pkg_logger.getEffectiveLevel() == logging.DEBUG

    assert get_config().log_level == previous
    assert pkg_logger.level == previous

    update_config(log_level=logging.WARNING)
    try:
        assert pkg_logger.level == logging.WARNING
    finally:
        update_config(log_level=previous)
