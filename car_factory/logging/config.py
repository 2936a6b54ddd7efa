"""
Centralized logging configuration for the car factory package.

All components log through structlog. Stdout is reserved for result lines, so
every log event goes to stderr: until `configure_logging` runs, a minimal
stderr configuration that drops anything below WARNING is installed on import.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger


def _install_default_logging() -> None:
    """Keep unconfigured structlog off stdout and quiet below WARNING."""
    if structlog.is_configured():
        return
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _renderer(format_json: bool) -> Any:
    if format_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    stream: Optional[TextIO] = None
) -> None:
    """
    Route structlog through the standard library and pick a renderer.

    Args:
        level: Logging level name
        format_json: Render JSON lines instead of console output
        include_timestamp: Add an ISO timestamp to each event
        include_caller: Add filename and line number to each event
        extra_processors: Processors inserted before the renderer
        stream: Destination stream, stderr when omitted
    """
    log_level = getattr(logging, level.upper())
    logging.basicConfig(level=log_level, stream=stream or sys.stderr, format="%(message)s")
    logging.getLogger().setLevel(log_level)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))
    processors.extend(extra_processors or [])
    processors.append(_renderer(format_json))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_factory_logger(name: str) -> FilteringBoundLogger:
    """
    Lazy logger carrying ``subsystem="factory"``.

    Nothing is resolved until the first event, so loggers created at import
    time pick up whatever `configure_logging` installs later.
    """
    return structlog.get_logger(name, subsystem="factory")


def log_product_created(
    logger: FilteringBoundLogger,
    factory: str,
    product: Any,
    capability: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the creation of a product with standardized fields.

    Args:
        logger: Structlog logger instance
        factory: Name of the factory that produced the product
        product: The freshly constructed product
        capability: Capability the product was requested for
        context: Additional context data
    """
    bound_logger = logger.bind(
        factory=factory,
        product=type(product).__name__,
        brand=getattr(getattr(product, "brand", None), "value", None),
        capability=capability,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("product_created")


_install_default_logging()
