"""
Record encoder tests.
"""
from __future__ import annotations

import pytest

from fldserde.core.codec import NULL_TEXT, RecordDecoder, RecordEncoder, encode_row
from fldserde.core.errors import SerDeConfigError
from fldserde.core.format import compile_descriptor

SAMPLE_LINE = "01mycolumn122015-07-18|100.50,my column 005 values"
SAMPLE_ROW = ["01", "mycolumn12", "2015-07-18", "100.50", "my column 005 values"]


def test_encode_sample_row(sample_descriptor):
    assert encode_row(sample_descriptor, SAMPLE_ROW) == SAMPLE_LINE


def test_encoder_class_matches_function(sample_descriptor):
    assert RecordEncoder(sample_descriptor).encode(SAMPLE_ROW) == SAMPLE_LINE


def test_fixed_column_is_left_padded():
    d = compile_descriptor("FL5#DM,", 2)
    assert encode_row(d, ["ab", "x"]) == "   abx,"


def test_fixed_column_never_truncates():
    d = compile_descriptor("FL2", 1)
    assert encode_row(d, ["abc"]) == "abc"


def test_fixed_column_exact_width_unchanged():
    d = compile_descriptor("FL3", 1)
    assert encode_row(d, ["abc"]) == "abc"


def test_rest_of_line_delimiter_is_written():
    d = compile_descriptor("FL2#DM\n", 2)
    assert encode_row(d, ["01", "tail"]) == "01tail\n"


def test_none_and_non_string_values():
    d = compile_descriptor("FL6#DM,#FL3", 3)
    assert encode_row(d, [None, None, 7]) == "  " + NULL_TEXT + NULL_TEXT + ",  7"


def test_accepts_any_sequence(sample_descriptor):
    assert encode_row(sample_descriptor, tuple(SAMPLE_ROW)) == SAMPLE_LINE


@pytest.mark.parametrize("values", [[], ["01"], SAMPLE_ROW + ["extra"]])
def test_wrong_value_count_is_config_error(sample_descriptor, values):
    with pytest.raises(SerDeConfigError, match="fields but the table has 5 columns"):
        encode_row(sample_descriptor, values)


def test_plain_string_is_rejected():
    d = compile_descriptor("FL1#FL1", 2)
    with pytest.raises(SerDeConfigError):
        encode_row(d, "ab")


def test_padded_round_trip_keeps_width():
    d = compile_descriptor("FL4#DM|#FL3", 3)
    line = encode_row(d, ["7", "abc", "x"])
    assert line == "   7abc|  x"
    row = RecordDecoder(d).decode(line)
    assert row == ["   7", "abc", "  x"]
    assert encode_row(d, row) == line


def test_mapping_is_rejected(sample_descriptor):
    record = dict(zip(["id", "name", "event_date", "amount", "note"], SAMPLE_ROW))
    with pytest.raises(SerDeConfigError, match="mapping"):
        encode_row(sample_descriptor, record)
