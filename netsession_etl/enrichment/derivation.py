"""Derivation engine — computes NetworkSession fields that depend on the
mapped payload, the raw record, or other derived fields.

Every function returns a new dict; the input record is never mutated.
"""

from typing import Optional

from netsession_etl.enrichment.hostname_resolver import HostnameResolver, resolve_dvc_fqdn
from netsession_etl.enrichment.lookups import (
    DEFAULT_LOOKUPS,
    LookupTables,
    normalize_action,
    normalize_severity,
)
from netsession_etl.records import RawRecord

EVENT_TYPE = "NetworkSession"
EVENT_SCHEMA = "NetworkSession"
EVENT_SCHEMA_VERSION = "0.2.4"
EVENT_VENDOR = "Barracuda"
EVENT_PRODUCT = "CloudGen Firewall"

RESULT_SUCCESS = "Success"
RESULT_FAILURE = "Failure"


def event_result(action: Optional[str]) -> str:
    """Success for an allowed session, Failure for anything else."""
    return RESULT_SUCCESS if action == "Allow" else RESULT_FAILURE


def derive_fields(
    record: dict,
    raw: RawRecord,
    action_token: str,
    tables: LookupTables = DEFAULT_LOOKUPS,
    resolver: HostnameResolver = resolve_dvc_fqdn,
) -> dict:
    """First derivation pass, run before any record-level filter.

    Args:
        record: Output of :func:`netsession_etl.parsers.barracuda_parser.map_fields`.
        raw: The raw record the fields were decoded from.
        action_token: Verdict token preceding the payload.
        tables: Action and severity lookups.
        resolver: Device hostname resolver.

    Returns:
        New dict with timestamps, constants, device and action fields added.
    """
    derived = dict(record)
    derived.update(
        EventCount=1,
        EventStartTime=raw.time_generated,
        EventEndTime=raw.time_generated,
        EventType=EVENT_TYPE,
        EventSchema=EVENT_SCHEMA,
        EventSchemaVersion=EVENT_SCHEMA_VERSION,
        EventVendor=EVENT_VENDOR,
        EventProduct=EVENT_PRODUCT,
        EventSeverity=normalize_severity(raw.severity_level, tables),
        Dvc=raw.computer or None,
    )

    derived.update(resolver(raw.computer))
    derived["Hostname"] = derived.get("DvcHostname")
    derived.setdefault("SrcHostname", None)
    derived.setdefault("DstHostname", None)

    derived["IpAddr"] = derived.get("SrcIpAddr") or derived.get("DstIpAddr")
    derived["Duration"] = derived.get("NetworkDuration")
    derived["NetworkBytes"] = _total(derived.get("SrcBytes"), derived.get("DstBytes"))
    derived["NetworkPackets"] = _total(derived.get("SrcPackets"), derived.get("DstPackets"))

    action = normalize_action(action_token, tables)
    derived["DvcAction"] = action
    derived["EventResult"] = event_result(action)
    return derived


def requery_action(record: dict, tables: LookupTables = DEFAULT_LOOKUPS) -> dict:
    """Second action pass: look the current DvcAction up again and recompute
    EventResult. This result is the one emitted."""
    action = normalize_action(record.get("DvcAction"), tables)
    requeried = dict(record)
    requeried["DvcAction"] = action
    requeried["EventResult"] = event_result(action)
    return requeried


def _total(first: Optional[int], second: Optional[int]) -> Optional[int]:
    if first is None or second is None:
        return None
    return first + second
