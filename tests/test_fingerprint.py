"""Unit tests for netsession_etl.quality.fingerprint."""

from collections import OrderedDict

from netsession_etl.quality.fingerprint import compute_event_hash, stamp_fingerprint


def _make_event(src_ip: str = "10.0.0.5", ts: str = "2026-01-01T00:00:00+00:00") -> dict:
    """Helper to build a minimal NetworkSession record for testing."""
    return {
        "EventStartTime": ts,
        "Dvc": "fw01",
        "EventSeverity": "Informational",
        "SrcIpAddr": src_ip,
        "ASimMatchingIpAddr": "-",
        "AdditionalFields": OrderedDict(type="Allow", srcIP=src_ip),
    }


class TestComputeEventHash:
    """Tests for the compute_event_hash function."""

    def test_same_event_produces_same_hash(self):
        assert compute_event_hash(_make_event()) == compute_event_hash(_make_event())

    def test_different_residual_produces_different_hash(self):
        assert compute_event_hash(_make_event("10.0.0.5")) != compute_event_hash(_make_event("10.0.0.6"))

    def test_different_time_produces_different_hash(self):
        e1 = _make_event(ts="2026-01-01T00:00:00+00:00")
        e2 = _make_event(ts="2026-01-01T00:00:01+00:00")
        assert compute_event_hash(e1) != compute_event_hash(e2)

    def test_match_diagnostics_ignored_in_hash(self):
        e1 = _make_event()
        e2 = _make_event()
        e2["ASimMatchingIpAddr"] = "SrcIpAddr"
        assert compute_event_hash(e1) == compute_event_hash(e2)

    def test_returns_hex_string(self):
        h = compute_event_hash(_make_event())
        assert isinstance(h, str)
        assert len(h) == 64  # SHA-256 hex digest length


class TestStampFingerprint:
    """Tests for the stamp_fingerprint function."""

    def test_fingerprint_matches_hash(self):
        event = _make_event()
        assert stamp_fingerprint(event)["EventFingerprint"] == compute_event_hash(event)

    def test_input_not_mutated(self):
        event = _make_event()
        stamp_fingerprint(event)
        assert "EventFingerprint" not in event

    def test_identical_events_both_kept(self):
        stamped = [stamp_fingerprint(e) for e in (_make_event(), _make_event())]
        assert len(stamped) == 2
        assert stamped[0]["EventFingerprint"] == stamped[1]["EventFingerprint"]
