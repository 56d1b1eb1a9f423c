"""
Logging setup shared by the app and the uvicorn entry point.
"""
import logging
import sys
from typing import Optional

from grammar_quiz.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger with a single stream handler.

    Safe to call more than once; the handler is replaced rather than stacked.
    """
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_grammar_quiz", False):
            root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._grammar_quiz = True
    root_logger.addHandler(handler)

    # Keep httpx request lines out of INFO output; they include the bot token
    logging.getLogger("httpx").setLevel(max(log_level, logging.WARNING))
