"""Logging configuration"""
import logging
from rich.logging import RichHandler

from .config import config


def setup_logger(name: str = "readiness", level: int = logging.INFO) -> logging.Logger:
    """Setup logger with rich formatting"""
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = RichHandler(rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger

# Global logger instance
logger = setup_logger(level=getattr(logging, config.log_level, logging.INFO))
