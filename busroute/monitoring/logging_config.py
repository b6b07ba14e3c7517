# busroute/monitoring/logging_config.py

import logging
import logging.config
import sys
from pathlib import Path
from typing import Optional

import structlog
import yaml


def setup_logging(
    level: str = "INFO",
    json_logs: bool = True,
    config_path: Optional[Path] = None,
):
    """Configure logging with the specified configuration."""
    if config_path and config_path.exists():
        with open(config_path) as f:
            config = yaml.safe_load(f)
            logging.config.dictConfig(config)
    else:
        logging.basicConfig(
            format="%(message)s",
            stream=sys.stdout,
            level=getattr(logging, level.upper(), logging.INFO),
        )
    _setup_structlog(json_logs)


def _setup_structlog(json_logs: bool):
    """Route structlog events through the stdlib logging handlers."""
    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
