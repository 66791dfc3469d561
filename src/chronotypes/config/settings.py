"""Unified settings — CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click (only flags that were set)
  2. Env vars     — ``CHRONOTYPES_*`` prefix
  3. Code defaults

These settings drive the CLI and plugin loading only. Coercion semantics
never depend on them.
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings


class ChronoSettings(BaseSettings):
    """Settings for the chronotypes CLI.

    Attributes:
        json_output: Emit results as JSON instead of human-readable text.
        verbose: DEBUG-level logging for ``chronotypes.*`` loggers.
        log_json: Structured JSON log lines on stderr.
        plugins_enabled: Load ``chronotypes.plugins`` entry points at startup.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CHRONOTYPES_",
    }

    json_output: bool = False
    verbose: bool = False
    log_json: bool = False
    plugins_enabled: bool = True

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> ChronoSettings:
        """Construct settings from a CLI invocation.

        Flags left at their unset value (``None`` or ``False``) do not
        override the environment.
        """
        overrides = {key: value for key, value in cli_flags.items() if value}
        return cls(**overrides)
