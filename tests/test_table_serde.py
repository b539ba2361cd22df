"""
Table serde tests: table properties, string-only schema, read/write entry points.
"""
from __future__ import annotations

import pytest

from fldserde.core.errors import SerDeConfigError
from fldserde.core.observability.metrics import snapshot_named
from fldserde.core.serde import SerDeProperties, TableSerDe
from fldserde.core.serde.properties import parse_column_types, parse_flag

SAMPLE_LINE = "01mycolumn122015-07-18|100.50,my column 005 values"
SAMPLE_ROW = ["01", "mycolumn12", "2015-07-18", "100.50", "my column 005 values"]


def _props(**overrides):
    props = {
        "columns": "id,name,event_date,amount,note",
        "columns.types": "string:string:string:string:string",
        "input.format.string": "FL2#FL10#DM|#DM,#FL20",
    }
    props.update(overrides)
    return {k: v for k, v in props.items() if v is not None}


def _serde(**overrides) -> TableSerDe:
    return TableSerDe("events").initialize(_props(**overrides))


# ---------------------------------------------------------------------------
# properties
# ---------------------------------------------------------------------------

def test_properties_defaults():
    p = SerDeProperties.from_table_properties({"columns": "a, b", "input.format.string": "FL1#FL1"})
    assert p.columns == ["a", "b"]
    assert p.column_types == ["string", "string"]
    assert p.separator == "#"
    assert p.strict is True


def test_properties_round_trip_to_table_properties():
    p = SerDeProperties.from_table_properties(_props(**{"input.format.strict": "false"}))
    again = SerDeProperties.from_table_properties(p.to_table_properties())
    assert again == p
    assert again.strict is False


def test_properties_require_columns():
    with pytest.raises(SerDeConfigError, match="columns"):
        SerDeProperties.from_table_properties({"input.format.string": "FL1"})


def test_parse_column_types_keeps_nested_separators():
    assert parse_column_types("string:map<string,int>,STRING") == ["string", "map<string,int>", "string"]


@pytest.mark.parametrize("raw,expected", [("true", True), ("0", False), ("Yes", True), (False, False), (None, True)])
def test_parse_flag(raw, expected):
    assert parse_flag(raw, True) is expected


def test_parse_flag_rejects_garbage():
    with pytest.raises(SerDeConfigError):
        parse_flag("maybe", True)


# ---------------------------------------------------------------------------
# initialize
# ---------------------------------------------------------------------------

def test_non_string_column_rejected_at_initialize():
    with pytest.raises(SerDeConfigError, match=r"column\[3\] named amount has type decimal\(10,2\)"):
        _serde(**{"columns.types": "string:string:string:decimal(10,2):string"})


def test_column_and_type_count_mismatch():
    with pytest.raises(SerDeConfigError, match="5 columns but 4 column types"):
        _serde(**{"columns.types": "string:string:string:string"})


def test_descriptor_column_count_mismatch_at_initialize():
    with pytest.raises(SerDeConfigError, match="Mismatch"):
        _serde(**{"input.format.string": "FL2#FL10"})


def test_schema_and_metadata():
    s = _serde()
    assert s.column_names == ["id", "name", "event_date", "amount", "note"]
    assert s.schema()[0] == {"name": "id", "type": "string"}
    assert s.serialized_class() is str
    assert s.serde_stats() is None


def test_uninitialized_serde_raises():
    with pytest.raises(SerDeConfigError, match="not initialized"):
        TableSerDe("x").deserialize(SAMPLE_LINE)


# ---------------------------------------------------------------------------
# missing format string
# ---------------------------------------------------------------------------

def test_missing_format_string_fails_on_read():
    s = _serde(**{"input.format.string": None})
    with pytest.raises(SerDeConfigError, match="does not have serde property"):
        s.deserialize(SAMPLE_LINE)


def test_missing_format_string_fails_on_write():
    s = _serde(**{"input.format.string": None})
    with pytest.raises(SerDeConfigError, match="Cannot write data into table"):
        s.serialize(SAMPLE_ROW)


# ---------------------------------------------------------------------------
# read / write
# ---------------------------------------------------------------------------

def test_deserialize_and_record():
    s = _serde()
    assert s.deserialize(SAMPLE_LINE) == SAMPLE_ROW
    assert s.deserialize_record(SAMPLE_LINE) == dict(zip(s.column_names, SAMPLE_ROW))


def test_deserialize_unmatched_counts_and_metrics():
    s = _serde()
    assert s.deserialize("0") is None
    assert s.deserialize_record("0") is None
    assert s.unmatched_count == 2
    named = snapshot_named()
    assert named["rows_unmatched"] == 2
    assert named["table_events|unmatched"] == 2


def test_lenient_table_delivers_absences():
    s = _serde(**{"input.format.strict": "false"})
    assert s.deserialize("0") == [None] * 5
    assert s.unmatched_count == 0


def test_custom_separator_property():
    s = _serde(**{"input.format.string": "FL2;FL10;DM|;DM,;FL20", "input.format.column.seperator": ";"})
    assert s.deserialize(SAMPLE_LINE) == SAMPLE_ROW


def test_serialize_sequence_and_mapping():
    s = _serde()
    assert s.serialize(SAMPLE_ROW) == SAMPLE_LINE
    assert s.serialize(dict(zip(s.column_names, SAMPLE_ROW))) == SAMPLE_LINE
    assert snapshot_named()["rows_encoded"] == 2


def test_serialize_mapping_missing_column():
    s = _serde()
    row = dict(zip(s.column_names, SAMPLE_ROW))
    del row["note"]
    with pytest.raises(SerDeConfigError, match="note"):
        s.serialize(row)


def test_serialize_wrong_width():
    s = _serde()
    with pytest.raises(SerDeConfigError, match="4 fields but the table has 5 columns"):
        s.serialize(SAMPLE_ROW[:4])
