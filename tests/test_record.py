"""
Record codec tests: argument schema, canonical encoding, strict decoding.
"""

import json

import pytest
from pydantic import ValidationError

from mqttledger.core.record import RECORD_SCHEMA, DeviceRecord, parse_args
from mqttledger.errors import ArityError, DecodeError, FormatError, RangeError

from .conftest import VALID_ARGS


def test_schema_order_matches_wire_order():
    assert [spec.name for spec in RECORD_SCHEMA] == [
        "id", "sn", "time", "deviceId", "opened", "codeType",
    ]


def test_parse_args_builds_record():
    rec = parse_args(VALID_ARGS)
    assert rec == DeviceRecord(id=1, sn=10, time=1000, deviceId=7, opened=True, codeType=2)
    assert rec.ledger_key == "1"


def test_ledger_key_is_canonical_decimal():
    rec = parse_args(["0042", "1", "1", "1", "false", "1"])
    assert rec.ledger_key == "42"


@pytest.mark.parametrize("args", [[], VALID_ARGS[:5], VALID_ARGS + ["extra"]])
def test_wrong_arity(args):
    with pytest.raises(ArityError) as exc:
        parse_args(args)
    assert str(exc.value) == "Incorrect number of arguments. Expecting 6."


def test_first_failure_wins():
    # both sn and opened are bad; sn comes first
    with pytest.raises(FormatError) as exc:
        parse_args(["1", "x", "1000", "7", "maybe", "2"])
    assert exc.value.field == "sn"


@pytest.mark.parametrize("index,field", [(3, "deviceId"), (5, "codeType")])
def test_32_bit_fields_reject_overflow(index, field):
    args = list(VALID_ARGS)
    args[index] = "4294967296"
    with pytest.raises(RangeError) as exc:
        parse_args(args)
    assert exc.value.field == field


def test_record_is_frozen():
    rec = parse_args(VALID_ARGS)
    with pytest.raises(ValidationError):
        rec.sn = 11


def test_encode_is_compact_and_ordered():
    assert parse_args(VALID_ARGS).encode() == (
        b'{"id":1,"sn":10,"time":1000,"deviceId":7,"opened":true,"codeType":2}'
    )


def test_max_values_survive_round_trip():
    args = ["18446744073709551615"] * 3 + ["4294967295", "False", "4294967295"]
    rec = parse_args(args)
    assert DeviceRecord.decode(rec.encode()) == rec


def test_extra_keys_are_ignored_on_decode():
    data = json.loads(parse_args(VALID_ARGS).encode())
    data["firmware"] = "1.2"
    assert DeviceRecord.decode(json.dumps(data).encode()) == parse_args(VALID_ARGS)


@pytest.mark.parametrize(
    "raw",
    [
        b"",
        b"not json",
        b"\xc3\x28",
        b"[1, 2, 3]",
        b'{"id":1,"sn":10,"time":1000,"deviceId":7,"opened":true}',
        b'{"id":1,"sn":10,"time":1000,"deviceId":7,"opened":1,"codeType":2}',
        b'{"id":"1","sn":10,"time":1000,"deviceId":7,"opened":true,"codeType":2}',
        b'{"id":1.0,"sn":10,"time":1000,"deviceId":7,"opened":true,"codeType":2}',
        b'{"id":-1,"sn":10,"time":1000,"deviceId":7,"opened":true,"codeType":2}',
        b'{"id":1,"sn":10,"time":1000,"deviceId":4294967296,"opened":true,"codeType":2}',
        b"[" * 100000,
        b'{"id":1,"sn":10,"time":1000,"device_id":7,"opened":true,"code_type":2}',
    ],
)
def test_decode_rejects_bad_payloads(raw):
    with pytest.raises(DecodeError):
        DeviceRecord.decode(raw)


def test_record_cannot_be_built_from_python_field_names():
    with pytest.raises(ValidationError):
        DeviceRecord(id=1, sn=10, time=1000, device_id=7, opened=True, code_type=2)
