"""Tests for PluginManager — registration and the register_coercions hook."""

from __future__ import annotations

import pytest

from chronotypes.domain.shapes import is_string
from chronotypes.plugins import PluginManager, hookimpl
from chronotypes.services.registry import TypeRegistry


class _WeekdayPlugin:
    """Adds a Weekday type and teaches DateTimeValue nothing new."""

    @hookimpl
    def register_coercions(self, registry: TypeRegistry) -> None:
        registry.register_type("Weekday", is_target=lambda v: isinstance(v, int))
        registry.add_coercion(
            "Weekday",
            is_string,
            lambda v: ["mon", "tue", "wed", "thu", "fri", "sat", "sun"].index(v),
            source="string",
        )


class _BrokenPlugin:
    @hookimpl
    def register_coercions(self, registry: TypeRegistry) -> None:
        registry.add_coercion("NoSuchType", is_string, str)


class _AliasPlugin:
    @hookimpl
    def register_coercions(self, registry: TypeRegistry) -> None:
        registry.register_alias("Instant", "DateTimeValue")


class TestPluginManager:
    def test_hook_relay_accessible(self) -> None:
        pm = PluginManager()
        assert hasattr(pm.hook, "register_coercions")

    def test_register_plugin(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_WeekdayPlugin(), name="weekday")
        assert "weekday" in pm.list_plugin_names()

    def test_register_plugin_default_name(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_WeekdayPlugin())
        assert "_WeekdayPlugin" in pm.list_plugin_names()

    def test_unregister_plugin(self) -> None:
        pm = PluginManager()
        plugin = _WeekdayPlugin()
        pm.register_plugin(plugin, name="weekday")
        pm.unregister(plugin)
        assert "weekday" not in pm.list_plugin_names()
        assert plugin not in pm.get_plugins()

    def test_is_loaded_false_before_discover(self) -> None:
        assert PluginManager().is_loaded is False

    def test_discover_runs_hook_against_registry(self, registry: TypeRegistry) -> None:
        pm = PluginManager()
        pm.register_plugin(_WeekdayPlugin(), name="weekday")
        names = pm.discover_and_load(registry, entry_points=False)
        assert names == ["weekday"]
        assert pm.is_loaded is True
        assert registry.coerce("Weekday", "wed") == 2

    def test_plugin_alias(self, registry: TypeRegistry) -> None:
        pm = PluginManager()
        pm.register_plugin(_AliasPlugin(), name="alias")
        pm.discover_and_load(registry, entry_points=False)
        assert registry.coerce("Instant", 0).year == 1970

    def test_broken_plugin_warns_and_others_still_load(
        self, registry: TypeRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        pm = PluginManager()
        pm.register_plugin(_BrokenPlugin(), name="broken")
        pm.register_plugin(_WeekdayPlugin(), name="weekday")
        with caplog.at_level("WARNING"):
            pm.discover_and_load(registry, entry_points=False)
        assert "Failed to register coercions from plugin broken" in caplog.text
        assert not registry.is_registered("NoSuchType")
        assert registry.is_registered("Weekday")

    def test_entry_point_discovery_without_plugins(self, registry: TypeRegistry) -> None:
        names_before = registry.names()
        pm = PluginManager()
        pm.discover_and_load(registry)
        assert pm.is_loaded is True
        assert registry.names()[: len(names_before)] == names_before

    def test_class_registered_plugins_are_instantiated(self, registry: TypeRegistry) -> None:
        pm = PluginManager()
        pm.register_plugin(_WeekdayPlugin, name="weekday-class")
        pm._normalize_plugin_instances()
        plugins = pm.get_plugins()
        assert len(plugins) == 1
        assert isinstance(plugins[0], _WeekdayPlugin)
        pm.discover_and_load(registry, entry_points=False)
        assert registry.is_registered("Weekday")

    def test_repeated_discovery_does_not_duplicate_rules(self, registry: TypeRegistry) -> None:
        pm = PluginManager()
        pm.register_plugin(_WeekdayPlugin(), name="weekday")
        pm.discover_and_load(registry, entry_points=False)
        pm.discover_and_load(registry, entry_points=False)
        assert [rule.label for rule in registry.describe("Weekday").rules] == ["string"]

    def test_plugin_registered_later_is_applied_on_next_discovery(
        self, registry: TypeRegistry
    ) -> None:
        pm = PluginManager()
        pm.register_plugin(_WeekdayPlugin(), name="weekday")
        pm.discover_and_load(registry, entry_points=False)
        pm.register_plugin(_AliasPlugin(), name="alias")
        pm.discover_and_load(registry, entry_points=False)
        assert len(registry.describe("Weekday").rules) == 1
        assert registry.describe("Instant").name == "DateTimeValue"

    def test_each_registry_gets_the_plugin_once(
        self, registry: TypeRegistry, empty_registry: TypeRegistry
    ) -> None:
        pm = PluginManager()
        pm.register_plugin(_WeekdayPlugin(), name="weekday")
        pm.discover_and_load(registry, entry_points=False)
        pm.discover_and_load(empty_registry, entry_points=False)
        assert len(registry.describe("Weekday").rules) == 1
        assert len(empty_registry.describe("Weekday").rules) == 1
