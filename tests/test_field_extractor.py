"""Unit tests for netsession_etl.parsers.field_extractor."""

from netsession_etl.parsers.field_extractor import PositionalFields, extract_fields

SAMPLE_MESSAGE = (
    "Allow: TCP|eth0|10.0.0.5|5000|AA:BB|93.1.1.1|443|HTTPS|eth1|rule1|info|-|-|"
    "30|1|2000|1000|10|5|user1|tcp|app1|tgt|content|cat1"
)


class TestExtractFields:
    """Tests for splitting a message into action token and payload."""

    def test_action_token_extracted(self):
        action, _ = extract_fields(SAMPLE_MESSAGE)
        assert action == "Allow"

    def test_payload_split_on_pipe(self):
        _, fields = extract_fields(SAMPLE_MESSAGE)
        assert len(fields) == 25
        assert fields[0] == "TCP"
        assert fields[-1] == "cat1"

    def test_mac_colon_stays_in_payload(self):
        _, fields = extract_fields(SAMPLE_MESSAGE)
        assert fields[4] == "AA:BB"

    def test_short_payload(self):
        action, fields = extract_fields("Block: UDP|eth1")
        assert action == "Block"
        assert list(fields) == ["UDP", "eth1"]

    def test_missing_separator_yields_empty(self):
        action, fields = extract_fields("TCP|eth0|10.0.0.5")
        assert action == ""
        assert len(fields) == 0

    def test_empty_message(self):
        action, fields = extract_fields("")
        assert action == ""
        assert len(fields) == 0

    def test_none_message(self):
        action, fields = extract_fields(None)
        assert action == ""
        assert len(fields) == 0

    def test_separator_without_payload(self):
        action, fields = extract_fields("Drop:")
        assert action == "Drop"
        assert len(fields) == 0


class TestPositionalFields:
    """Tests for the bounds-checked accessor."""

    def test_in_range(self):
        assert PositionalFields(["a", "b"]).at(1) == "b"

    def test_out_of_range_returns_empty(self):
        assert PositionalFields(["a"]).at(5) == ""

    def test_negative_index_returns_empty(self):
        assert PositionalFields(["a"]).at(-1) == ""
