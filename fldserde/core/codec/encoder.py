from __future__ import annotations

from typing import Any, List, Mapping, Sequence

from fldserde.core.errors import SerDeConfigError
from fldserde.core.format.models import Descriptor, FixedColumn

# Text written for a missing value.
NULL_TEXT = "null"


def render_value(value: Any) -> str:
    if value is None:
        return NULL_TEXT
    if isinstance(value, str):
        return value
    return str(value)


def encode_row(descriptor: Descriptor, values: Sequence[Any]) -> str:
    """
    Build one line from ``values`` in column order.

    Fixed columns are right-justified with spaces; a value at least as long as
    the width is written unchanged (no truncation). Delimited columns are the
    value followed by the delimiter.
    """
    if isinstance(values, (str, bytes)):
        raise SerDeConfigError("Cannot serialize a plain string; expected one value per column")
    if isinstance(values, Mapping):
        raise SerDeConfigError("Cannot serialize a mapping; expected one value per column in column order")

    values = list(values)
    if len(values) != len(descriptor):
        raise SerDeConfigError(
            f"Cannot serialize the object because there are {len(values)} fields "
            f"but the table has {len(descriptor)} columns."
        )

    parts: List[str] = []
    for col, value in zip(descriptor.columns, values):
        text = render_value(value)
        if isinstance(col, FixedColumn):
            parts.append(text.rjust(col.length))
        else:
            parts.append(text + col.delimiter)
    return "".join(parts)


class RecordEncoder:
    def __init__(self, descriptor: Descriptor):
        self.descriptor = descriptor

    def encode(self, values: Sequence[Any]) -> str:
        return encode_row(self.descriptor, values)
