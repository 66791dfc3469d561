"""Plugin discovery and loading.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints
in the ``chronotypes.plugins`` group. Each plugin's ``register_coercions``
hook runs against the registry passed to :meth:`PluginManager.discover_and_load`.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

import pluggy

from chronotypes.plugins.hookspecs import PROJECT_NAME, ChronotypesHookSpec

if TYPE_CHECKING:
    from chronotypes.services.registry import TypeRegistry

ENTRY_POINT_GROUP = "chronotypes.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and registry setup."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(ChronotypesHookSpec)
        self._loaded: bool = False
        # (id of registry, plugin name) pairs whose hook already ran
        self._applied: set[tuple[int, str]] = set()

    def discover_and_load(
        self,
        registry: TypeRegistry | None = None,
        *,
        entry_points: bool = True,
    ) -> list[str]:
        """Discover entry-point plugins and let every plugin extend *registry*.

        *registry* defaults to the process-wide registry. A plugin's hook runs
        at most once per registry, so repeated calls only apply plugins
        registered since the last one. Returns the names of all registered
        plugins.
        """
        if registry is None:
            from chronotypes.services.registry import REGISTRY

            registry = REGISTRY

        if entry_points:
            self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
            self._normalize_plugin_instances()
        for plugin in self._pm.get_plugins():
            self._register_plugin_coercions(plugin, registry)
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def get_plugins(self) -> list[object]:
        """Return all registered plugins."""
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def _plugin_name(self, plugin: object) -> str:
        return self._pm.get_name(plugin) or plugin.__class__.__name__

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    def _register_plugin_coercions(self, plugin: object, registry: TypeRegistry) -> None:
        """Run a single plugin's ``register_coercions`` hook.

        A plugin that raises is logged and skipped; rules it registered
        before failing stay in place.
        """
        hook = getattr(plugin, "register_coercions", None)
        if hook is None:
            return

        plugin_name = self._plugin_name(plugin)
        key = (id(registry), plugin_name)
        if key in self._applied:
            return
        self._applied.add(key)
        try:
            hook(registry=registry)
        except Exception:
            logger.warning(
                "Failed to register coercions from plugin %s",
                plugin_name,
                exc_info=True,
            )
            return
        logger.debug("Loaded coercions from plugin %s", plugin_name)
