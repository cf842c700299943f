"""Batch job — normalizes a JSON-lines file of raw Syslog rows into
NetworkSession JSON lines.

Usage:
    python -m netsession_etl.batch_job [INPUT_PATH]

Filter criteria are read from ``SESSION_*`` environment variables.
"""

import json
import os
import sys
from typing import Iterator, Optional, TextIO

import structlog

from netsession_etl.filters.criteria import FilterCriteria
from netsession_etl.pipeline import NetworkSessionParser
from netsession_etl.quality.fingerprint import stamp_fingerprint
from netsession_etl.records import RawRecord, parse_timestamp

log = structlog.get_logger(component="batch_job")

INPUT_PATH = os.getenv("SESSION_INPUT_PATH", "raw-sessions.jsonl")
OUTPUT_PATH = os.getenv("SESSION_OUTPUT_PATH", "")


def _split_env(name: str) -> list:
    return [v.strip() for v in os.getenv(name, "").split(",") if v.strip()]


def criteria_from_env() -> FilterCriteria:
    """Build :class:`FilterCriteria` from ``SESSION_*`` environment variables.

    Set-valued options are comma separated.
    """
    port = os.getenv("SESSION_DSTPORTNUMBER", "").strip()
    return FilterCriteria(
        starttime=parse_timestamp(os.getenv("SESSION_STARTTIME")),
        endtime=parse_timestamp(os.getenv("SESSION_ENDTIME")),
        srcipaddr_has_any_prefix=_split_env("SESSION_SRCIPADDR_HAS_ANY_PREFIX"),
        dstipaddr_has_any_prefix=_split_env("SESSION_DSTIPADDR_HAS_ANY_PREFIX"),
        ipaddr_has_any_prefix=_split_env("SESSION_IPADDR_HAS_ANY_PREFIX"),
        dstportnumber=int(port) if port else None,
        hostname_has_any=_split_env("SESSION_HOSTNAME_HAS_ANY"),
        dvcaction=_split_env("SESSION_DVCACTION"),
        eventresult=os.getenv("SESSION_EVENTRESULT", "*"),
        disabled=os.getenv("SESSION_DISABLED", "false").lower() in ("1", "true", "yes"),
    )


def read_raw_records(lines: TextIO) -> Iterator[RawRecord]:
    """Yield raw records from JSON lines, skipping lines that fail to decode."""
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            row = json.loads(line)
        except json.JSONDecodeError as exc:
            log.error("parse_error", line=lineno, error=str(exc))
            continue
        if not isinstance(row, dict):
            log.error("parse_error", line=lineno, error="row is not an object")
            continue
        yield RawRecord.from_dict(row)


def run(input_path: str = INPUT_PATH, output_path: Optional[str] = None,
        criteria: Optional[FilterCriteria] = None) -> int:
    """Normalize *input_path* and write NetworkSession JSON lines.

    Args:
        input_path: JSON-lines file of Syslog rows.
        output_path: Destination file; stdout when empty.
        criteria: Filter criteria. Defaults to the environment.

    Returns:
        Number of records written.
    """
    if output_path is None:
        output_path = OUTPUT_PATH
    parser = NetworkSessionParser(criteria or criteria_from_env())
    log.info("batch_processing_start", input=input_path, output=output_path or "stdout")

    written = 0
    out = open(output_path, "w", encoding="utf-8") if output_path else sys.stdout
    try:
        with open(input_path, "r", encoding="utf-8") as f:
            for event in parser.parse_all(read_raw_records(f)):
                event = stamp_fingerprint(event)
                out.write(json.dumps(event, default=str) + "\n")
                written += 1
    finally:
        if out is not sys.stdout:
            out.close()

    log.info("batch_processing_done", input=input_path, written=written)
    return written


if __name__ == "__main__":
    path_arg = sys.argv[1] if len(sys.argv) > 1 else INPUT_PATH
    run(path_arg)
