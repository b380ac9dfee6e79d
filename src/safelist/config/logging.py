"""structlog setup for safelist.

Log events are dotted names (``list.grouped``, ``contract.violated``,
``span.complete``); the prefix is copied into a ``scope`` field so JSON
logs can be filtered by area. Everything goes to stderr, rendered for
the console by default or as one JSON object per line with ``--log-json``.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

PACKAGE_LOGGER = "safelist"


def add_event_scope(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
    """Set ``scope`` from the part of a dotted event name before the first dot."""
    event = event_dict.get("event")
    if isinstance(event, str) and "." in event and " " not in event:
        event_dict.setdefault("scope", event.split(".", 1)[0])
    return event_dict


def _pre_chain() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_event_scope,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _stderr_handler(renderer: Processor) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib records through one stderr handler.

    Repeated calls replace the handler rather than adding another.
    Only the ``safelist`` logger drops to DEBUG under *verbose*.
    """
    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if log_json
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    structlog.configure(
        processors=[*_pre_chain(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers[:] = [_stderr_handler(renderer)]
    root.setLevel(logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
