"""
Logging configuration with session URL redaction
"""

import logging
import logging.config
from typing import Any, Dict, Optional

from focus_sessions.modules.config import get_config

REDACTED = "[url]"


class SessionUrlFilter(logging.Filter):
    """Filter to keep browsed URLs out of the logs."""

    def __init__(self, redact: bool = True):
        super().__init__()
        self.redact = redact

    def filter(self, record: logging.LogRecord) -> bool:
        """Replace the session URL in the record's arguments."""
        # Only records logged with extra={"session_url": ...} carry a URL
        url = getattr(record, "session_url", None)
        if self.redact and url and isinstance(record.args, tuple):
            record.args = tuple(REDACTED if arg == url else arg for arg in record.args)
        return True  # Never drop records, only rewrite them


def get_logging_config(level: str = "INFO", redact_urls: bool = True) -> Dict[str, Any]:
    """Get logging configuration for the focus_sessions loggers."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "session_url_filter": {
                "()": SessionUrlFilter,
                "redact": redact_urls,
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
                "filters": ["session_url_filter"],
            }
        },
        "loggers": {
            "focus_sessions": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            }
        },
        "root": {
            "level": "WARNING",
            "handlers": ["default"]
        }
    }


def configure_logging(level: Optional[str] = None) -> None:
    """
    Apply the logging configuration, using configured values by default.

    Applications call this once at startup; importing the package does not
    touch logging.
    """
    config = get_config()
    logging.config.dictConfig(
        get_logging_config(
            level=(level or config.get("log_level")).upper(),
            redact_urls=not config.get("debug", False),
        )
    )
