"""Record fingerprint — a content hash over the fields that identify the raw
activity line a NetworkSession record was normalized from."""

import hashlib
import json

FINGERPRINT_FIELD = "EventFingerprint"

# Match diagnostics are left out so the same line hashes alike under any criteria
_HASH_FIELDS = ("EventStartTime", "Dvc", "EventSeverity", "AdditionalFields")


def compute_event_hash(event: dict) -> str:
    """Return the hex SHA-256 of the identifying fields of *event*.

    Identical activity lines logged in the same second share a fingerprint;
    it traces a record back to its line content and is not a unique key.
    """
    fingerprint = {k: event.get(k) for k in _HASH_FIELDS if k in event}
    serialized = json.dumps(fingerprint, sort_keys=True, default=str)
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()


def stamp_fingerprint(event: dict) -> dict:
    """Return a copy of *event* carrying its ``EventFingerprint``."""
    stamped = dict(event)
    stamped[FINGERPRINT_FIELD] = compute_event_hash(event)
    return stamped
