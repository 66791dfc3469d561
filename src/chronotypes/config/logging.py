"""Route chronotypes log records to stderr through structlog.

Library modules log with ``logging.getLogger(__name__)`` and emit only two
kinds of records: DEBUG when types, rules, aliases or plugins are
registered, and WARNING when a plugin fails. :func:`configure_logging`
(called once by the CLI) renders them with a
``structlog.stdlib.ProcessorFormatter``, as console text or JSON lines.
"""

from __future__ import annotations

import logging
import sys

import structlog

LIBRARY_LOGGER = "chronotypes"

# Babel reports locale data loading at DEBUG.
_QUIET_LOGGERS = ("babel",)


def _build_formatter(*, log_json: bool) -> structlog.stdlib.ProcessorFormatter:
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    renderer: structlog.types.Processor
    if log_json:
        # Plugin failures carry exc_info; JSON needs it as text.
        pre_chain.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install a single stderr handler on the root logger.

    Args:
        verbose: Show the registration DEBUG records. Otherwise only plugin
            warnings get through.
        log_json: One JSON object per record instead of console text.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_build_formatter(log_json=log_json))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(LIBRARY_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
