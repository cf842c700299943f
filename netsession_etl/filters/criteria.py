"""Filter criteria supplied per parser invocation."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import FrozenSet, Iterable, Optional, Tuple

from netsession_etl.records import parse_timestamp

RESULT_WILDCARD = "*"


def _frozen(values: Optional[Iterable[str]]) -> FrozenSet[str]:
    if not values:
        return frozenset()
    if isinstance(values, str):
        values = [values]
    return frozenset(v.strip() for v in values if v and v.strip())


@dataclass(frozen=True)
class FilterCriteria:
    """Invocation options; empty sets and None bounds match everything."""

    starttime: Optional[datetime] = None
    endtime: Optional[datetime] = None
    srcipaddr_has_any_prefix: FrozenSet[str] = field(default_factory=frozenset)
    dstipaddr_has_any_prefix: FrozenSet[str] = field(default_factory=frozenset)
    ipaddr_has_any_prefix: FrozenSet[str] = field(default_factory=frozenset)
    dstportnumber: Optional[int] = None
    hostname_has_any: FrozenSet[str] = field(default_factory=frozenset)
    dvcaction: FrozenSet[str] = field(default_factory=frozenset)
    eventresult: str = RESULT_WILDCARD
    disabled: bool = False

    def __post_init__(self):
        # naive bounds are taken as UTC, like record times
        object.__setattr__(self, "starttime", parse_timestamp(self.starttime))
        object.__setattr__(self, "endtime", parse_timestamp(self.endtime))
        # accept lists/tuples from callers, store frozensets
        for name in (
            "srcipaddr_has_any_prefix",
            "dstipaddr_has_any_prefix",
            "ipaddr_has_any_prefix",
            "hostname_has_any",
            "dvcaction",
        ):
            object.__setattr__(self, name, _frozen(getattr(self, name)))
        if not self.eventresult:
            object.__setattr__(self, "eventresult", RESULT_WILDCARD)

    def effective_prefixes(self) -> Tuple[FrozenSet[str], FrozenSet[str]]:
        """Return the (source, destination) prefix sets with the generic
        ``ipaddr_has_any_prefix`` set unioned into both."""
        return (
            self.srcipaddr_has_any_prefix | self.ipaddr_has_any_prefix,
            self.dstipaddr_has_any_prefix | self.ipaddr_has_any_prefix,
        )
