"""Field extractor — splits a Barracuda activity message into its verdict
token and pipe-delimited positional payload."""

import re
from typing import Tuple


# "<verdict>: <f0>|<f1>|..." where the verdict never contains ':' or '|'
_ACTION_PATTERN = re.compile(r"^\s*(?P<action>[^:|]*?)\s*:\s?(?P<payload>.*)$", re.DOTALL)

FIELD_SEPARATOR = "|"


class PositionalFields(tuple):
    """Ordered payload values with a bounds-checked accessor."""

    def at(self, index: int) -> str:
        """Return the value at *index*, or an empty string past the end."""
        if 0 <= index < len(self):
            return self[index]
        return ""


def extract_fields(message: str) -> Tuple[str, PositionalFields]:
    """Extract the action token and positional fields from a message.

    Args:
        message: Free-text syslog message body.

    Returns:
        ``(action_token, fields)``. When the message has no verdict
        separator both parts are empty.
    """
    match = _ACTION_PATTERN.match(message or "")
    if not match:
        return "", PositionalFields()

    payload = match.group("payload")
    if not payload:
        return match.group("action"), PositionalFields()
    return match.group("action"), PositionalFields(payload.split(FIELD_SEPARATOR))
