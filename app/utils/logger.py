"""
Centralized logging utility for consistent logging across the application.
"""

import logging
import sys
import os

def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with consistent configuration.

    Loggers under the ``app`` namespace are configured by
    ``setup_logging``; a handler is only attached here for loggers that
    would otherwise have nowhere to write (scripts, other namespaces).
    """
    logger = logging.getLogger(name)

    if not logger.handlers and not name.startswith("app"):
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        # Set log level from environment
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        logger.setLevel(getattr(logging, log_level, logging.INFO))

    return logger
