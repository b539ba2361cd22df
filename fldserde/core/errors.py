from __future__ import annotations


INPUT_FORMAT_STRING = "input.format.string"
INPUT_FORMAT_COLUMN_SEPERATOR = "input.format.column.seperator"
INPUT_FORMAT_STRICT = "input.format.strict"


class SerDeConfigError(ValueError):
    """
    Configuration tier error: bad descriptor, schema mismatch, wrong row width
    on encode. Always propagated to the caller, never counted or swallowed.
    """
