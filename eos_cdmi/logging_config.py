"""
Logging configuration for the EOS CDMI adapter
"""

import logging
import logging.config
from typing import Any, Dict, Optional


class CommandResponseFilter(logging.Filter):
    """Filter to shorten raw command responses in debug logs."""

    def __init__(self, max_length: int = 1024):
        super().__init__()
        self.max_length = max_length

    def filter(self, record: logging.LogRecord) -> bool:
        """Truncate parser messages that embed a whole command response."""
        if record.name == "eos_cdmi.parsing":
            message = record.getMessage()
            if len(message) > self.max_length:
                record.msg = message[: self.max_length] + "...[truncated]"
                record.args = None
        return True  # Never suppress, only shorten


def get_logging_config(level: Optional[str] = None) -> Dict[str, Any]:
    """Get logging configuration for the eos_cdmi loggers."""
    if level is None:
        from eos_cdmi.modules.config import get_config

        level = get_config().get("log_level")

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "command_response_filter": {
                "()": CommandResponseFilter
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
                "filters": ["command_response_filter"]
            }
        },
        "loggers": {
            "eos_cdmi": {
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
    """Apply the logging configuration."""
    logging.config.dictConfig(get_logging_config(level))
