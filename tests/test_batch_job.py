"""Unit tests for netsession_etl.batch_job."""

import io
import json

from netsession_etl import batch_job
from netsession_etl.filters.criteria import FilterCriteria

ROW = {
    "TimeGenerated": "2026-01-01T12:00:00Z",
    "Computer": "fw01",
    "ProcessName": "box_Firewall_Activity",
    "SyslogMessage": "Block: UDP|eth1|10.1.1.1|5353|AA:BB|8.8.8.8|53|DNS",
    "SeverityLevel": "warning",
}


class TestReadRawRecords:
    """Tests for the read_raw_records generator function."""

    def test_skips_invalid_lines(self):
        lines = io.StringIO(json.dumps(ROW) + "\nnot json\n\n[1, 2]\n")
        records = list(batch_job.read_raw_records(lines))
        assert len(records) == 1
        assert records[0].computer == "fw01"
        assert records[0].time_generated.year == 2026


class TestCriteriaFromEnv:
    """Tests for building criteria from SESSION_* variables."""

    def test_defaults(self, monkeypatch):
        for name in ("SESSION_DSTPORTNUMBER", "SESSION_DVCACTION", "SESSION_DISABLED"):
            monkeypatch.delenv(name, raising=False)
        criteria = batch_job.criteria_from_env()
        assert criteria.dstportnumber is None
        assert criteria.dvcaction == frozenset()
        assert criteria.disabled is False

    def test_values_parsed(self, monkeypatch):
        monkeypatch.setenv("SESSION_DSTPORTNUMBER", "443")
        monkeypatch.setenv("SESSION_IPADDR_HAS_ANY_PREFIX", "10.,192.168.")
        monkeypatch.setenv("SESSION_STARTTIME", "2026-01-01T00:00:00Z")
        monkeypatch.setenv("SESSION_DISABLED", "true")
        criteria = batch_job.criteria_from_env()
        assert criteria.dstportnumber == 443
        assert criteria.ipaddr_has_any_prefix == frozenset({"10.", "192.168."})
        assert criteria.starttime.year == 2026
        assert criteria.disabled is True


class TestRun:
    """Tests for the run function."""

    def test_writes_normalized_lines(self, tmp_path):
        src = tmp_path / "raw.jsonl"
        dst = tmp_path / "out.jsonl"
        src.write_text(json.dumps(ROW) + "\n", encoding="utf-8")

        written = batch_job.run(str(src), str(dst), criteria=FilterCriteria())

        assert written == 1
        event = json.loads(dst.read_text(encoding="utf-8").strip())
        assert event["DvcAction"] == "Deny"
        assert event["EventResult"] == "Failure"
        assert event["EventSeverity"] == "Medium"
        assert event["DstPortNumber"] == 53
        assert len(event["EventFingerprint"]) == 64

    def test_repeated_lines_each_written(self, tmp_path):
        src = tmp_path / "raw.jsonl"
        dst = tmp_path / "out.jsonl"
        src.write_text(json.dumps(ROW) + "\n" + json.dumps(ROW) + "\n", encoding="utf-8")

        written = batch_job.run(str(src), str(dst), criteria=FilterCriteria())

        assert written == 2
        lines = dst.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2

    def test_criteria_filter_rows(self, tmp_path):
        src = tmp_path / "raw.jsonl"
        dst = tmp_path / "out.jsonl"
        src.write_text(json.dumps(ROW) + "\n", encoding="utf-8")

        written = batch_job.run(str(src), str(dst), criteria=FilterCriteria(eventresult="Success"))

        assert written == 0
        assert dst.read_text(encoding="utf-8") == ""
