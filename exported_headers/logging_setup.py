import logging
import sys
import structlog

PACKAGE_LOGGER_NAME = "exported_headers"

def verbosity_to_level(verbosity: int) -> int:
    # -v enables info, -vv and beyond enable debug; warnings are always shown.
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING

def _select_renderer(force_json_logs: bool):
    if force_json_logs:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

def configure_logging(verbosity: int = 0, force_json_logs: bool = False) -> logging.Logger:
    """
    Routes structlog events from the package through stdlib logging to
    stderr, so they never mix with the header list on stdout.

    Safe to call repeatedly: the package logger's handler is replaced.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        processor=_select_renderer(force_json_logs),
        foreign_pre_chain=[structlog.stdlib.add_log_level],
    ))

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(verbosity_to_level(verbosity))
    package_logger.propagate = False

    structlog.get_logger(__name__).info("logging_configured", verbosity=verbosity, json=force_json_logs)
    return package_logger
