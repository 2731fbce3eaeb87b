"""
EOS command response parsing.

An EOS command response follows the format:
    mgm.proc.stdout=<output>&mgm.proc.stderr=<errors>&mgm.proc.retc=<retc>

Each value runs until the next '&' or the end of the response.
"""

import logging
from typing import Optional

logger = logging.getLogger("eos_cdmi.parsing")

STDOUT_FIELD = "mgm.proc.stdout="
STDERR_FIELD = "mgm.proc.stderr="
RETC_FIELD = "mgm.proc.retc="


class BackendError(Exception):
    """Raised when an EOS command fails or its output cannot be used."""

    def __init__(self, message: str, server_message: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.server_message = server_message


def _field_value(response: str, field_name: str) -> Optional[str]:
    """Return the value of a response field, or None if the field is absent."""
    pos = response.find(field_name)
    if pos == -1:
        return None

    start = pos + len(field_name)
    end = response.find("&", start)
    if end == -1:
        end = len(response)

    return response[start:end]


def extract_cmd_output(response: str) -> str:
    """
    Extract the command output from a full EOS command response.

    Args:
        response: Raw response text

    Returns:
        The stdout value, or the response unchanged when it holds
        neither a stdout nor a stderr field

    Raises:
        BackendError: If the response carries a non-empty stderr value
    """
    logger.debug(f"Extracting output from command response: {response}")

    # Errors win over any output
    error_message = _field_value(response, STDERR_FIELD)
    if error_message:
        logger.debug(f"Command failed: {error_message}")
        raise BackendError(
            f"Server responded with error message -- {error_message}",
            server_message=error_message,
        )

    output = _field_value(response, STDOUT_FIELD)
    if output is not None:
        return output

    return response


def extract_retc(response: str) -> Optional[int]:
    """Return the command return code, or None if absent or not an integer."""
    value = _field_value(response, RETC_FIELD)
    if value is None:
        return None

    try:
        return int(value.strip())
    except ValueError:
        logger.debug(f"Ignoring non-integer return code: {value!r}")
        return None
