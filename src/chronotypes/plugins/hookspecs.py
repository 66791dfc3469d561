"""Pluggy hook specifications for chronotypes.

One setup-time hook lets plugins add types, coercions and aliases to a
registry before it is used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from chronotypes.services.registry import TypeRegistry

PROJECT_NAME = "chronotypes"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class ChronotypesHookSpec:
    """Hook specifications for the chronotypes plugin system."""

    @hookspec
    def register_coercions(self, registry: TypeRegistry) -> None:
        """Register types, coercions and aliases on *registry*.

        Called once per :meth:`PluginManager.discover_and_load`, during
        initialization and before the registry is shared with readers.
        """
