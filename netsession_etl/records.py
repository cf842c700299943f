"""Raw syslog record as handed over by the intake layer."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Union


def parse_timestamp(value: Union[datetime, str, None]) -> Optional[datetime]:
    """Parse an ISO-8601 string (or pass a datetime through) as tz-aware UTC.

    Returns None for missing or unparseable values.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        ts = value
    else:
        try:
            ts = datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


@dataclass(frozen=True)
class RawRecord:
    time_generated: Optional[datetime]
    computer: str = ""
    process_name: str = ""
    syslog_message: str = ""
    severity_level: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "time_generated", parse_timestamp(self.time_generated))

    @classmethod
    def from_dict(cls, row: dict) -> "RawRecord":
        """Build a record from a Syslog-table shaped dict."""
        return cls(
            time_generated=row.get("TimeGenerated"),
            computer=row.get("Computer") or "",
            process_name=row.get("ProcessName") or "",
            syslog_message=row.get("SyslogMessage") or "",
            severity_level=row.get("SeverityLevel"),
        )
