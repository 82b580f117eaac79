"""Logging setup for flatorm entry points.

Library modules only create module loggers; handlers are installed by
applications or by the CLI through :func:`setup_logging`. JSON output is
rendered by structlog on top of the standard library handlers.
"""

from __future__ import annotations

import logging
from typing import Optional

import structlog

from flatorm.core.config import FlatORMConfig, config as default_config

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Applied to every stdlib record before rendering
SHARED_PROCESSORS = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def json_formatter() -> structlog.stdlib.ProcessorFormatter:
    """Formatter rendering each record as one JSON object per line."""
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(),
        ],
    )


def setup_logging(cfg: Optional[FlatORMConfig] = None) -> None:
    """Configure the root logger from flatorm configuration.

    Args:
        cfg: Configuration to use (defaults to the global config)
    """
    cfg = cfg or default_config

    handler = logging.StreamHandler()
    if cfg.log_format == "json":
        handler.setFormatter(json_formatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    logging.basicConfig(level=cfg.log_level, handlers=[handler], force=True)
