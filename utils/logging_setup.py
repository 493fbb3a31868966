"""
Logging configuration for the landing page.
Streamlit reruns the script on every interaction, so setup must be idempotent.
"""

import logging

from config import LOG_LEVEL

_LOGGING_CONFIGURED = False


def configure_logging() -> None:
    """Configure process-wide logging from LOG_LEVEL"""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    level = getattr(logging, LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    _LOGGING_CONFIGURED = True
