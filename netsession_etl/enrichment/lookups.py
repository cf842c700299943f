"""Lookup tables — map raw Barracuda verdict tokens and syslog severity
levels to their normalized NetworkSession values."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Union


ACTION_LOOKUP: Mapping[str, str] = MappingProxyType({
    "Allow": "Allow",
    "LocalAllow": "Allow",
    "CacheAllow": "Allow",
    "Detect": "Allow",
    "Deny": "Deny",
    "Block": "Deny",
    "LocalBlock": "Deny",
    "Drop": "Deny",
    "LocalDrop": "Deny",
    "Remove": "Deny",
    "LocalRemove": "Deny",
    "Fail": "Deny",
})

SEVERITY_LOOKUP: Mapping[str, str] = MappingProxyType({
    "emerg": "High",
    "alert": "High",
    "crit": "High",
    "err": "Medium",
    "warning": "Medium",
    "notice": "Low",
    "info": "Informational",
    "debug": "Informational",
    # numeric syslog severity codes
    "0": "High",
    "1": "High",
    "2": "High",
    "3": "Medium",
    "4": "Medium",
    "5": "Low",
    "6": "Informational",
    "7": "Informational",
})

DEFAULT_SEVERITY = "Informational"


@dataclass(frozen=True)
class LookupTables:
    """Read-only action and severity tables injected into the parser."""

    action: Mapping[str, str] = field(default_factory=lambda: ACTION_LOOKUP)
    severity: Mapping[str, str] = field(default_factory=lambda: SEVERITY_LOOKUP)

    @classmethod
    def from_dicts(cls, action: dict, severity: dict) -> "LookupTables":
        return cls(
            action=MappingProxyType(dict(action)),
            severity=MappingProxyType(dict(severity)),
        )


DEFAULT_LOOKUPS = LookupTables()


def normalize_action(token: Optional[str], tables: LookupTables = DEFAULT_LOOKUPS) -> str:
    """Return the normalized action for *token*.

    Unknown tokens are passed through unchanged; a missing token becomes
    an empty string.
    """
    token = token or ""
    return tables.action.get(token, token)


def normalize_severity(level: Union[str, int, None], tables: LookupTables = DEFAULT_LOOKUPS) -> str:
    """Return the normalized severity for a syslog *level*."""
    if level is None or level == "":
        return DEFAULT_SEVERITY
    return tables.severity.get(str(level), level)
