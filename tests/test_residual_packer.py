"""Unit tests for netsession_etl.parsers.residual_packer."""

from netsession_etl.parsers.barracuda_parser import FIELD_LABELS
from netsession_etl.parsers.residual_packer import WORKING_FIELDS, pack_residual


def _make_record(decoded: dict) -> dict:
    return {
        "SrcIpAddr": "10.0.0.5",
        "_action_token": "Allow",
        "_positional_fields": ("TCP",),
        "_message": "Allow: TCP",
        "_decoded": decoded,
    }


class TestPackResidual:
    """Tests for the pack_residual function."""

    def test_working_fields_dropped(self):
        packed = pack_residual(_make_record({"type": "Allow", "proto": "TCP"}))
        for field in WORKING_FIELDS:
            assert field not in packed
        assert packed["SrcIpAddr"] == "10.0.0.5"

    def test_every_label_present_even_when_missing(self):
        packed = pack_residual(_make_record({"proto": "TCP"}))
        assert list(packed["AdditionalFields"]) == list(FIELD_LABELS)
        assert packed["AdditionalFields"]["proto"] == "TCP"
        assert packed["AdditionalFields"]["urlcat"] == ""

    def test_input_not_mutated(self):
        record = _make_record({})
        pack_residual(record)
        assert "_message" in record
