"""Logging configuration (stdlib logging + structlog)."""

import logging as _logging

import structlog


def configure_logging(level: str = "INFO") -> None:
    """Configure stdlib logging and route structlog through it.

    Args:
        level: Log level name (unknown names fall back to INFO)
    """
    resolved = getattr(_logging, level.upper(), _logging.INFO)
    _logging.basicConfig(
        level=resolved,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(
                key_order=["event"], sort_keys=True
            ),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    for name in ("startup", "uvicorn.access"):
        lg = _logging.getLogger(name)
        if lg.level == 0:  # not set explicitly
            lg.setLevel(resolved)
