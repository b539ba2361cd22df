from __future__ import annotations

import re
from typing import List, Optional

from fldserde.core.errors import INPUT_FORMAT_STRING, SerDeConfigError

from .models import DEFAULT_SEPARATOR, ColumnSpec, DelimitedColumn, Descriptor, FixedColumn

_DIGITS = re.compile(r"[0-9]+")


def split_format_string(format_string: str, separator: str = DEFAULT_SEPARATOR) -> List[str]:
    # Literal split: separators such as "|" or "." are never treated as patterns.
    if not separator:
        raise SerDeConfigError("Column format separator must not be empty")
    return format_string.split(separator)


def compile_column(token: str, *, format_string: str) -> ColumnSpec:
    if len(token) < 2:
        raise SerDeConfigError(f"Invalid {INPUT_FORMAT_STRING} : {format_string}")

    kind = token[:2].upper()
    rest = token[2:]

    if kind == "FL":
        if not _DIGITS.fullmatch(rest):
            raise SerDeConfigError(
                f"Invalid fixed length {rest!r} in column format {token!r} of {INPUT_FORMAT_STRING} : {format_string}"
            )
        length = int(rest)
        if length <= 0:
            raise SerDeConfigError(f"Fixed length must be positive in column format {token!r}")
        return FixedColumn(length=length)

    if kind == "DM":
        if not rest:
            raise SerDeConfigError(f"Missing delimiter in column format {token!r}")
        return DelimitedColumn(delimiter=rest)

    raise SerDeConfigError(f"Invalid {INPUT_FORMAT_STRING} : {format_string}")


def compile_descriptor(
    format_string: Optional[str],
    num_columns: int,
    separator: Optional[str] = DEFAULT_SEPARATOR,
) -> Descriptor:
    """
    Parse a format string such as ``FL2#FL10#DM|#DM,#FL20`` into a Descriptor.

    Every token starts with ``FL`` (fixed length, followed by the width) or
    ``DM`` (delimited, followed by the delimiter verbatim). Prefixes are
    case-insensitive. The number of tokens must equal ``num_columns``.
    """
    if not format_string:
        raise SerDeConfigError(f"Missing serde property \"{INPUT_FORMAT_STRING}\"")
    sep = DEFAULT_SEPARATOR if separator is None else separator

    tokens = split_format_string(format_string, sep)
    if len(tokens) != num_columns:
        raise SerDeConfigError(
            f"Mismatch columnFormats.length : {len(tokens)} between numColumns : {num_columns}"
        )

    columns = tuple(compile_column(t, format_string=format_string) for t in tokens)
    return Descriptor(columns=columns, format_string=format_string, separator=sep)
