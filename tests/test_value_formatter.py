import datetime
import decimal
import uuid

import pytest

from sqlcsv.errors import MalformedIdentifier
from sqlcsv.models.column_descriptor import ColumnDescriptor
from sqlcsv.service.formatter.value_formatter import format_value


def column(type_name):
    return ColumnDescriptor(name="c", database_type_name=type_name)


@pytest.mark.parametrize("type_name", ["INT", "BIT", "UNIQUEIDENTIFIER", "MONEY", "DECIMAL", "VARBINARY", "VARCHAR"])
def test_null_uses_literal_for_every_type(type_name):
    assert format_value(column(type_name), None) == "NULL"
    assert format_value(column(type_name), None, "") == ""
    assert format_value(column(type_name), None, "<nil>") == "<nil>"


@pytest.mark.parametrize("value, expected", [
    (42, "42"),
    (-7, "-7"),
    (1.5, "1.5"),
    (0.1, "0.1"),
    ("hello, \"world\"", "hello, \"world\""),
    ("", ""),
    (datetime.date(2024, 1, 2), "2024-01-02"),
])
def test_default_text_form(value, expected):
    assert format_value(column("INT"), value) == expected


def test_bit_renders_as_digits():
    assert format_value(column("BIT"), True) == "1"
    assert format_value(column("BIT"), False) == "0"


def test_guid_round_trip_from_wire_layout():
    guid = uuid.UUID("6f9619ff-8b86-d011-b42d-00c04fc964ff")
    wire = guid.bytes_le
    assert wire[:4] == bytes.fromhex("ff19966f")

    assert format_value(column("UNIQUEIDENTIFIER"), wire) == "6f9619ff-8b86-d011-b42d-00c04fc964ff"
    assert format_value(column("UNIQUEIDENTIFIER"), bytearray(wire)) == str(guid)


def test_guid_already_decoded_is_lowercased():
    assert format_value(column("UNIQUEIDENTIFIER"), "6F9619FF-8B86-D011-B42D-00C04FC964FF") == \
        "6f9619ff-8b86-d011-b42d-00c04fc964ff"
    guid = uuid.uuid4()
    assert format_value(column("UNIQUEIDENTIFIER"), guid) == str(guid)


@pytest.mark.parametrize("value", [b"\x01\x02\x03", b"", "not-a-guid"])
def test_malformed_guid(value):
    with pytest.raises(MalformedIdentifier):
        format_value(column("UNIQUEIDENTIFIER"), value)


@pytest.mark.parametrize("type_name", ["MONEY", "DECIMAL"])
def test_money_and_decimal_keep_driver_digits(type_name):
    assert format_value(column(type_name), b"12.3400") == "12.3400"
    assert format_value(column(type_name), decimal.Decimal("12.3400")) == "12.3400"
    assert format_value(column(type_name), decimal.Decimal("1E-7")) == "0.0000001"


def test_bytes_render_as_hex():
    assert format_value(column("VARBINARY"), b"\x00\xffA") == "0x00ff41"
    assert format_value(column("VARBINARY"), bytearray(b"\xab")) == "0xab"
    assert format_value(column("VARBINARY"), b"") == "0x"


def test_bool_outside_bit_column_is_lowercase():
    assert format_value(column("SQL_VARIANT"), True) == "true"
    assert format_value(column("INT"), False) == "false"
