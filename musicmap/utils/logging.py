"""Structured logging setup using structlog.

# ─── WHERE LOG LINES GO ───────────────────────────────────────────────
#
#   stdout  ← the ranked report, nothing else
#   stderr  ← every log line (structlog events and stdlib records alike)
#
# A run is usually piped (`musicmap known.txt | head -20`), so a warning
# about one failed artist page must never land between two report lines.
#
# Rendering:
#   - development (default): ConsoleRenderer, coloured only on a terminal
#   - production:            JSONRenderer, one object per line
#
# The CLI picks the renderer from Settings.app_env (YAML or
# MUSICMAP_APP_ENV) and passes it in as ``json_output``.  The bare
# APP_ENV variable is still honoured for callers that never build Settings.
# ──────────────────────────────────────────────────────────────────────
"""

import logging
import os
import sys

import structlog

# HTTP libraries that log one INFO line per request.  With up to 24
# downloads in flight that drowns the per-artist warnings.
_NOISY_LIBRARIES = ("httpx", "httpcore")


def _build_renderer(use_json: bool) -> structlog.types.Processor:
    if use_json:
        return structlog.processors.JSONRenderer()
    # Colour codes in a redirected stderr file are just noise.
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _bridge_stdlib(
    level: str,
    shared_processors: list[structlog.types.Processor],
    renderer: structlog.types.Processor,
) -> None:
    """Send stdlib ``logging`` records through the same processors, to stderr."""
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            renderer,
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()  # a second configure call must not double every line
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in _NOISY_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)


def configure_logging(log_level: str = "INFO", json_output: bool = False) -> structlog.BoundLogger:
    """Configure structlog for a musicmap run.

    Args:
        log_level: Logging level string (DEBUG, INFO, WARNING, ERROR).
        json_output: Render JSON lines.  When False, JSON is still used if
            the ``APP_ENV`` environment variable is ``"production"``.

    Returns:
        A configured structlog BoundLogger.
    """
    level = log_level.upper()
    use_json = json_output or os.environ.get("APP_ENV", "development") == "production"
    renderer = _build_renderer(use_json)

    # Runs for both renderers; contextvars first so bound context is merged
    # before the level and timestamp keys are added.
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=[*shared_processors, renderer],
        # Debug events (one per parsed page) are dropped before any
        # processor runs unless DEBUG was asked for.
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
    _bridge_stdlib(level, shared_processors, renderer)

    return structlog.get_logger()


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a named structlog logger, configuring defaults on first use."""
    if not structlog.is_configured():
        configure_logging()

    return structlog.get_logger(logger_name=name)
