"""Structlog configuration for the AWS client package.

Importing this module configures structlog once, from ``settings.LOG_LEVEL``
and ``settings.is_production``. Callers embedding the client in a larger
application can call ``configure_logging`` again with their own values.

Usage:
    from provider.logging import get_module_logger

    logger = get_module_logger()
    logger.info("aws_session_created", region="us-east-1")
"""

import logging
import sys
import inspect
import structlog
from structlog.stdlib import BoundLogger
from typing import Any, Callable, List, Optional, Sequence
from provider.configuration import settings
from provider.logging.formatters import mask_sensitive_data, truncate_large_values

Processor = Callable[..., Any]

# Above CRITICAL, so nothing is emitted while tests run
SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _build_processors(
    prod_mode: bool, extra_processors: Optional[Sequence[Processor]]
) -> List[Processor]:
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        mask_sensitive_data(),
        truncate_large_values(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    processors.extend(extra_processors or ())
    processors.append(
        structlog.processors.JSONRenderer()
        if prod_mode
        else structlog.dev.ConsoleRenderer()
    )
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    extra_processors: Optional[Sequence[Processor]] = None,
) -> BoundLogger:
    """Configure structlog on top of the standard library logging module.

    Under pytest everything is silenced regardless of the arguments.

    Args:
        log_level: Level name; defaults to ``settings.LOG_LEVEL``.
        is_production: JSON output when true, console output otherwise;
            defaults to ``settings.is_production``.
        extra_processors: Processors run after masking, before the renderer.

    Returns:
        A logger using the new configuration
    """
    if _is_test_environment():
        logging.root.setLevel(SILENT_LEVEL)
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)
        return structlog.stdlib.get_logger()

    prod_mode = is_production if is_production is not None else settings.is_production

    structlog.configure(
        processors=_build_processors(prod_mode, extra_processors),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def _caller_module_name() -> Optional[str]:
    # Two frames up: past this helper and the public function calling it
    frame = inspect.currentframe()
    for _ in range(2):
        if frame is None:
            return None
        frame = frame.f_back
    if frame is None:
        return None
    module = inspect.getmodule(frame)
    return module.__name__ if module else None


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Get a logger with ``logger_name`` bound.

    Args:
        name: Usually ``__name__``; the calling module is used when omitted.
    """
    return logger.bind(logger_name=name or _caller_module_name() or "unknown")


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    In ``provider/aws/factory.py`` this binds ``component="factory"`` and
    ``module_path="provider.aws.factory"``.
    """
    module_name = _caller_module_name()
    if module_name is None:
        return logger.bind(component="unknown")
    return logger.bind(component=module_name.split(".")[-1], module_path=module_name)
