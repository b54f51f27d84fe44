"""
Logging Setup
=============
Optional structlog configuration for applications that do not configure
logging themselves. Hashy only emits events; it never calls this on its
own.

Nothing hashy logs contains a password or a hash string.
"""

import logging
import sys
from typing import List

import structlog
from structlog.types import Processor


def setup_logging(level: str = "INFO", json_output: bool = True) -> None:
    """
    Route structlog events through stdlib logging to stdout.
    
    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Render JSON (production) or colored console output
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    
    shared_processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    
    if json_output:
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()
    
    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler.setLevel(log_level)
    
    hashy_logger = logging.getLogger("hashy")
    hashy_logger.handlers = [handler]
    hashy_logger.setLevel(log_level)
    hashy_logger.propagate = False
