from .models import (
    DEFAULT_SEPARATOR,
    LINE_TERMINATOR,
    ColumnSpec,
    DelimitedColumn,
    Descriptor,
    FixedColumn,
)
from .compiler import compile_descriptor, split_format_string

__all__ = [
    "DEFAULT_SEPARATOR",
    "LINE_TERMINATOR",
    "ColumnSpec",
    "DelimitedColumn",
    "Descriptor",
    "FixedColumn",
    "compile_descriptor",
    "split_format_string",
]
