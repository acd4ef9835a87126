"""structlog configuration for sllist.

Two output modes:
- Human (default): console-rendered output to stderr
- JSON (log_json): structured JSON lines to stderr

Records from ``sllist`` loggers carry ``op``, ``error_code`` and ``size``
fields (see :data:`LOG_FIELDS`), lifted from the stdlib ``extra`` mapping.

The library never calls this on import; applications opt in.
"""

from __future__ import annotations

import logging
import sys

import structlog

from sllist.config.settings import get_settings

# ``extra=`` keys the library attaches to its own log records.
LOG_FIELDS: tuple[str, ...] = ("op", "error_code", "size")


def flag_contract_violation(
    logger: object,
    method_name: str,
    event_dict: structlog.types.EventDict,
) -> structlog.types.EventDict:
    """Mark events that precede a raised ``SllistError``.

    Library call sites attach the exception's ``code`` as ``error_code``;
    this adds ``contract_violation=True`` so JSON consumers can filter on
    one key.
    """
    if event_dict.get("error_code"):
        event_dict["contract_violation"] = True
    return event_dict


def configure_logging(
    *,
    verbose: bool | None = None,
    log_json: bool | None = None,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level output for ``sllist`` loggers. When
            False, only WARNING+. None falls back to settings.
        log_json: Use JSON renderer instead of console renderer. None
            falls back to settings.
    """
    settings = get_settings()
    if verbose is None:
        verbose = settings.verbose
    if log_json is None:
        log_json = settings.log_json

    sllist_level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(allow=LOG_FIELDS),
        flag_contract_violation,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("sllist").setLevel(sllist_level)
