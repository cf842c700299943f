"""Residual field packer — keeps every decoded positional value next to the
normalized fields and strips the parser's working fields."""

from collections import OrderedDict

from netsession_etl.parsers.barracuda_parser import FIELD_LABELS

ACTION_TOKEN_FIELD = "_action_token"
POSITIONAL_FIELD = "_positional_fields"
MESSAGE_FIELD = "_message"
DECODED_FIELD = "_decoded"

WORKING_FIELDS = (ACTION_TOKEN_FIELD, POSITIONAL_FIELD, MESSAGE_FIELD, DECODED_FIELD)


def pack_residual(record: dict) -> dict:
    """Attach ``AdditionalFields`` built from the raw decoded values and
    drop the working fields."""
    decoded = record.get(DECODED_FIELD) or {}
    packed = {k: v for k, v in record.items() if k not in WORKING_FIELDS}
    packed["AdditionalFields"] = OrderedDict(
        (label, decoded.get(label, "")) for label in FIELD_LABELS
    )
    return packed
