"""IP prefix matching and the source/destination match classification."""

import ipaddress
from typing import FrozenSet, Iterable, Optional

MATCH_NONE_REQUESTED = "-"
MATCH_BOTH = "Both"
MATCH_SRC = "SrcIpAddr"
MATCH_DST = "DstIpAddr"
MATCH_FAILED = "No match"


def has_ipv4_prefix(ip: Optional[str], prefix: str) -> bool:
    """Return True if *ip* falls under *prefix*.

    A prefix is either whole leading octets (``"10."``, ``"10.0"``,
    ``"10.0.0.5"``) or a CIDR block (``"10.0.0.0/8"``).
    """
    if not ip or not prefix:
        return False
    try:
        address = ipaddress.IPv4Address(ip.strip())
    except ValueError:
        return False

    prefix = prefix.strip()
    if "/" in prefix:
        try:
            return address in ipaddress.IPv4Network(prefix, strict=False)
        except ValueError:
            return False

    wanted = [octet for octet in prefix.split(".") if octet != ""]
    if not wanted or len(wanted) > 4:
        return False
    return str(address).split(".")[: len(wanted)] == wanted


def has_any_ipv4_prefix(ip: Optional[str], prefixes: Iterable[str]) -> bool:
    return any(has_ipv4_prefix(ip, prefix) for prefix in prefixes)


def classify_ip_match(
    src_ip: Optional[str],
    dst_ip: Optional[str],
    src_prefixes: FrozenSet[str],
    dst_prefixes: FrozenSet[str],
) -> str:
    """Classify which address role matched the requested prefixes.

    Returns ``"-"`` when no prefixes were requested at all, otherwise one of
    ``"Both"``, ``"SrcIpAddr"``, ``"DstIpAddr"`` or ``"No match"``.
    """
    if not src_prefixes and not dst_prefixes:
        return MATCH_NONE_REQUESTED

    src_match = has_any_ipv4_prefix(src_ip, src_prefixes)
    dst_match = has_any_ipv4_prefix(dst_ip, dst_prefixes)
    if src_match and dst_match:
        return MATCH_BOTH
    if src_match:
        return MATCH_SRC
    if dst_match:
        return MATCH_DST
    return MATCH_FAILED
