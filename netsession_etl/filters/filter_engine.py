"""Filter gates — each gate is a pure predicate over a raw or derived record.

Empty criteria always pass. The parser evaluates the gates in the order they
are defined here and stops at the first rejection.
"""

from datetime import datetime
from typing import Optional

from netsession_etl.filters.criteria import RESULT_WILDCARD, FilterCriteria
from netsession_etl.filters.ip_matcher import MATCH_FAILED

MATCH_HOSTNAME_NONE_REQUESTED = "-"
MATCH_HOSTNAME_DVC = "DvcHostname"


def time_window_gate(time_generated: Optional[datetime], criteria: FilterCriteria) -> bool:
    """Inclusive time window on the ingestion time; absent bounds are open."""
    if criteria.starttime is not None:
        if time_generated is None or time_generated < criteria.starttime:
            return False
    if criteria.endtime is not None:
        if time_generated is None or time_generated > criteria.endtime:
            return False
    return True


def disabled_gate(criteria: FilterCriteria) -> bool:
    return not criteria.disabled


def source_tag_gate(process_name: str, expected: str) -> bool:
    return process_name == expected


def match_hostname(record: dict, criteria: FilterCriteria) -> Optional[str]:
    """Return the hostname match classification, or None when nothing matched.

    Unlike a plain emptiness check, a non-empty criterion is tested against
    the device hostname and FQDN (case-insensitive).
    """
    if not criteria.hostname_has_any:
        return MATCH_HOSTNAME_NONE_REQUESTED

    wanted = {name.lower() for name in criteria.hostname_has_any}
    for field in ("DvcHostname", "DvcFQDN"):
        value = record.get(field)
        if value and value.lower() in wanted:
            return MATCH_HOSTNAME_DVC
    return None


def hostname_gate(record: dict, criteria: FilterCriteria) -> bool:
    return match_hostname(record, criteria) is not None


def dst_port_gate(record: dict, criteria: FilterCriteria) -> bool:
    if criteria.dstportnumber is None:
        return True
    return record.get("DstPortNumber") == criteria.dstportnumber


def ip_gate(classification: str) -> bool:
    return classification != MATCH_FAILED


def action_gate(record: dict, criteria: FilterCriteria) -> bool:
    if not criteria.dvcaction:
        return True
    return record.get("DvcAction") in criteria.dvcaction


def result_gate(record: dict, criteria: FilterCriteria) -> bool:
    if criteria.eventresult == RESULT_WILDCARD:
        return True
    return record.get("EventResult") == criteria.eventresult
