"""
Logging configuration for Bill Bot.

What the service logs:
    - bill_bot.parsers: DEBUG only. Skipped qualifier matches, matches inside
      an earlier item, aliases the catalog does not carry.
    - bill_bot.services.billing: INFO. Which parser produced each bill, and
      orders nobody could recognize (first 80 characters of the transcript).
    - bill_bot.llm_fallback: INFO token usage per call, WARNING when no API
      key is set, ERROR when a call fails. API keys are never logged.

The HTTP and LLM client libraries are held at WARNING unless LOG_LEVEL is
DEBUG, since they log every request.

Usage:
    from bill_bot.logging_config import setup_logging
    setup_logging()  # Call once at application startup

Environment variables:
    LOG_LEVEL: Set to DEBUG, INFO, WARNING, ERROR, or CRITICAL (default: INFO)
"""
import logging
import os
import sys

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Chatty client libraries silenced unless we are debugging
NOISY_LOGGERS = ("httpx", "httpcore", "openai", "instructor", "sqlalchemy.engine")


def setup_logging(level: str = None) -> None:
    """
    Configure logging for the application.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If not provided, reads from LOG_LEVEL env var, defaults to INFO.
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    level = level.upper()

    if level not in VALID_LEVELS:
        level = "INFO"

    numeric_level = getattr(logging, level)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )

    logging.getLogger("bill_bot").setLevel(numeric_level)

    third_party_level = logging.DEBUG if level == "DEBUG" else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(third_party_level)

    logger = logging.getLogger(__name__)
    logger.debug("Logging configured at %s level", level)
