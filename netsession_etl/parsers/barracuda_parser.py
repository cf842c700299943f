"""Barracuda CloudGen Firewall parser — decodes the positional activity log
payload and promotes it to NetworkSession field names."""

from collections import OrderedDict
from typing import Optional

from netsession_etl.parsers.field_extractor import PositionalFields


# Syslog process name of the firewall activity stream
PROCESS_NAME = "box_Firewall_Activity"

# Labels in payload order. "type" is not part of the pipe payload; it
# carries the verdict token that precedes the ':' separator.
FIELD_LABELS = (
    "type",
    "proto",
    "srcIF",
    "srcIP",
    "srcPort",
    "srcMAC",
    "dstIP",
    "dstPort",
    "dstService",
    "dstIF",
    "rule",
    "info",
    "srcNAT",
    "dstNAT",
    "duration",
    "count",
    "receivedBytes",
    "sentBytes",
    "receivedPackets",
    "sentPackets",
    "user",
    "protocol",
    "application",
    "target",
    "content",
    "urlcat",
)

_PAYLOAD_LABELS = FIELD_LABELS[1:]

# label -> (schema field, numeric)
_FIELD_MAP = {
    "proto": ("NetworkProtocol", False),
    "srcIF": ("SrcInterfaceName", False),
    "srcIP": ("SrcIpAddr", False),
    "srcPort": ("SrcPortNumber", True),
    "srcMAC": ("SrcMacAddr", False),
    "dstIP": ("DstIpAddr", False),
    "dstPort": ("DstPortNumber", True),
    "dstService": ("NetworkApplicationProtocol", False),
    "dstIF": ("DstInterfaceName", False),
    "rule": ("NetworkRuleName", False),
    "info": ("EventResultDetails", False),
    "srcNAT": ("SrcNatIpAddr", False),
    "dstNAT": ("DstNatIpAddr", False),
    "duration": ("NetworkDuration", True),
    "receivedBytes": ("DstBytes", True),
    "sentBytes": ("SrcBytes", True),
    "receivedPackets": ("DstPackets", True),
    "sentPackets": ("SrcPackets", True),
    "user": ("SrcUsername", False),
    "application": ("DstAppName", False),
    "urlcat": ("UrlCategory", False),
}


def decode_positions(action_token: str, fields: PositionalFields) -> "OrderedDict[str, str]":
    """Label every positional value; missing trailing positions become ``""``."""
    decoded = OrderedDict(type=action_token or "")
    for index, label in enumerate(_PAYLOAD_LABELS):
        decoded[label] = fields.at(index)
    return decoded


def map_fields(decoded: dict) -> dict:
    """Promote decoded labels to typed NetworkSession fields.

    Args:
        decoded: Mapping produced by :func:`decode_positions`.

    Returns:
        Dict of schema field names; empty strings and unparseable numbers
        become None.
    """
    mapped = {}
    for label, (name, numeric) in _FIELD_MAP.items():
        value = decoded.get(label, "")
        if numeric:
            mapped[name] = _safe_int(value)
        else:
            mapped[name] = value if value != "" else None
    return mapped


def _safe_int(value) -> Optional[int]:
    """Convert a value to int, returning None on failure."""
    try:
        return int(value)
    except (ValueError, TypeError):
        return None
