"""NetworkSession pipeline — turns Barracuda CloudGen Firewall activity
records into normalized NetworkSession records, applying the caller's
filter criteria along the way."""

from typing import Iterable, Iterator, Optional, Union

import structlog

from netsession_etl.enrichment.derivation import derive_fields, requery_action
from netsession_etl.enrichment.hostname_resolver import HostnameResolver, resolve_dvc_fqdn
from netsession_etl.enrichment.lookups import DEFAULT_LOOKUPS, LookupTables
from netsession_etl.filters import filter_engine
from netsession_etl.filters.criteria import FilterCriteria
from netsession_etl.filters.ip_matcher import classify_ip_match
from netsession_etl.parsers.barracuda_parser import PROCESS_NAME, decode_positions, map_fields
from netsession_etl.parsers.field_extractor import extract_fields
from netsession_etl.parsers.residual_packer import (
    ACTION_TOKEN_FIELD,
    DECODED_FIELD,
    MESSAGE_FIELD,
    POSITIONAL_FIELD,
    pack_residual,
)
from netsession_etl.records import RawRecord

log = structlog.get_logger(component="pipeline")


class NetworkSessionParser:
    """Per-record transform from raw activity records to NetworkSession dicts.

    The parser holds no per-record state, so one instance can be shared
    across threads or workers. Prefix unions are computed once here.
    """

    def __init__(
        self,
        criteria: Optional[FilterCriteria] = None,
        lookups: Optional[LookupTables] = None,
        resolver: Optional[HostnameResolver] = None,
        process_name: str = PROCESS_NAME,
    ):
        self.criteria = criteria or FilterCriteria()
        self.lookups = lookups or DEFAULT_LOOKUPS
        self.resolver = resolver or resolve_dvc_fqdn
        self.process_name = process_name
        self.src_prefixes, self.dst_prefixes = self.criteria.effective_prefixes()

    def parse(self, raw: Union[RawRecord, dict]) -> Optional[dict]:
        """Normalize a single raw record.

        Args:
            raw: A :class:`RawRecord` or a Syslog-table shaped dict.

        Returns:
            The NetworkSession dict, or None if any filter gate rejected it.
        """
        if isinstance(raw, dict):
            raw = RawRecord.from_dict(raw)
        criteria = self.criteria

        if not filter_engine.time_window_gate(raw.time_generated, criteria):
            return self._drop("time_window")
        if not filter_engine.disabled_gate(criteria):
            return self._drop("disabled")
        if not filter_engine.source_tag_gate(raw.process_name, self.process_name):
            return self._drop("source_tag")

        action_token, fields = extract_fields(raw.syslog_message)
        decoded = decode_positions(action_token, fields)
        record = derive_fields(
            map_fields(decoded), raw, action_token, self.lookups, self.resolver
        )
        record.update({
            ACTION_TOKEN_FIELD: action_token,
            POSITIONAL_FIELD: fields,
            MESSAGE_FIELD: raw.syslog_message,
            DECODED_FIELD: decoded,
        })

        hostname_match = filter_engine.match_hostname(record, criteria)
        if hostname_match is None:
            return self._drop("hostname")
        record["ASimMatchingHostname"] = hostname_match
        if not filter_engine.dst_port_gate(record, criteria):
            return self._drop("dst_port")

        classification = classify_ip_match(
            record.get("SrcIpAddr"),
            record.get("DstIpAddr"),
            self.src_prefixes,
            self.dst_prefixes,
        )
        if not filter_engine.ip_gate(classification):
            return self._drop("ip_prefix")
        record["ASimMatchingIpAddr"] = classification

        record = requery_action(record, self.lookups)
        if not filter_engine.action_gate(record, criteria):
            return self._drop("dvc_action")
        if not filter_engine.result_gate(record, criteria):
            return self._drop("event_result")

        return pack_residual(record)

    def parse_all(self, records: Iterable[Union[RawRecord, dict]]) -> Iterator[dict]:
        """Yield the normalized records that pass every gate."""
        for raw in records:
            normalized = self.parse(raw)
            if normalized is not None:
                yield normalized

    @staticmethod
    def _drop(gate: str) -> None:
        log.debug("record_dropped", gate=gate)
        return None
