"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy plugin loading and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from chronotypes.output.formatters import OutputSettings, format_descriptors, format_result

if TYPE_CHECKING:
    from chronotypes.config.settings import ChronoSettings
    from chronotypes.domain.rules import TypeDescriptor
    from chronotypes.services.registry import TypeRegistry
    from chronotypes.services.result import CoercionResult


_plugins_loaded = False


def _load_plugins_once(registry: TypeRegistry) -> None:
    """Run entry-point plugins against *registry* at most once per process."""
    global _plugins_loaded
    if _plugins_loaded:
        return
    from chronotypes.plugins.manager import PluginManager

    PluginManager().discover_and_load(registry)
    _plugins_loaded = True


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The registry's plugins are loaded on first access so ``--help`` and
    ``--version`` never import third-party plugins.
    """

    def __init__(self, settings: ChronoSettings) -> None:
        self.settings = settings
        self._registry: TypeRegistry | None = None

        from chronotypes.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def registry(self) -> TypeRegistry:
        """The process-wide registry, with plugins loaded when enabled."""
        if self._registry is None:
            from chronotypes.services.registry import REGISTRY

            if self.settings.plugins_enabled:
                _load_plugins_once(REGISTRY)
            self._registry = REGISTRY
        return self._registry

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(json_output=self.settings.json_output)

    def emit(self, result: CoercionResult) -> None:
        """Format and output a CoercionResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, settings=self.output_settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def emit_descriptors(self, descriptors: list[TypeDescriptor]) -> None:
        click.echo(format_descriptors(descriptors, settings=self.output_settings))
