"""structlog logging setup for the CLI and the report endpoint.

cspguard loggers and plain stdlib loggers (uvicorn, starlette) are rendered
by the same formatter, so every line carries ``level``, ``component`` and
``timestamp`` whichever API emitted it.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog


def _logger_as_component(
    logger: logging.Logger, method_name: str, event_dict: dict
) -> dict:
    """Report the emitting module under 'component' instead of 'logger'."""
    if "logger" in event_dict:
        event_dict["component"] = event_dict.pop("logger").removeprefix("cspguard.")
    return event_dict


def _drop_blank_fields(
    logger: logging.Logger, method_name: str, event_dict: dict
) -> dict:
    """Omit empty-string fields, e.g. the unset members of a violation report."""
    return {key: value for key, value in event_dict.items() if value != ""}


_PRE_CHAIN: tuple[structlog.types.Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    _logger_as_component,
    _drop_blank_fields,
    structlog.processors.TimeStamper(fmt="iso"),
)


def _build_formatter(json_format: bool) -> logging.Formatter:
    renderer: structlog.types.Processor
    if json_format:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=list(_PRE_CHAIN),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )


def setup_logging(
    log_level: str = "info",
    json_format: bool = True,
    stream: TextIO | None = None,
) -> None:
    """Install one stderr handler (or ``stream``) on the root logger.

    Calling it again replaces the previous handler, so the CLI and the app
    lifespan can both call it.
    """
    structlog.configure(
        processors=[
            *_PRE_CHAIN,
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(_build_formatter(json_format))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
