"""
Logging setup for go-ts-generator.

Modules log through standard library loggers under ``go_ts_generator``.
Progress events that carry values (roots scanned, declarations kept,
endpoint usages attached) go through `get_logger`, whose key/value pairs
travel to the stdlib record as extras. Nothing is printed until
`configure_logging` installs a handler, so library callers keep control of
their own logging.
"""

import logging
import sys
from typing import Optional, TextIO

import structlog

PACKAGE_LOGGER = "go_ts_generator"


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger backed by the stdlib logger `name`.

    Levels, handlers and propagation are those of the stdlib logger.
    Keyword arguments of each call become LogRecord attributes.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[structlog.stdlib.render_to_log_kwargs],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def build_formatter(*, log_json: bool, colors: bool = False) -> logging.Formatter:
    """
    Build the formatter used for every record on the CLI's stderr handler.

    Args:
        log_json: Render one JSON object per line instead of console text.
        colors: Use ANSI colors in console mode.
    """
    pre_chain = [
        # values passed to get_logger() loggers arrive as record extras
        structlog.stdlib.ExtraAdder(),
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_json:
        renderers = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderers = [structlog.dev.ConsoleRenderer(colors=colors)]

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *renderers,
        ],
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """
    Route log records to stderr for a CLI run.

    Replaces any handlers on the root logger, so repeated calls do not stack
    output. Third-party loggers stay at WARNING; the package logger drops to
    DEBUG when verbose.

    Args:
        verbose: Show DEBUG records from go_ts_generator.
        log_json: Emit JSON lines instead of console text.
        stream: Destination (default: sys.stderr).

    Returns:
        The installed handler.
    """
    stream = stream or sys.stderr

    handler = logging.StreamHandler(stream)
    handler.setFormatter(build_formatter(log_json=log_json, colors=stream.isatty()))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    return handler
