from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field

from fldserde.core.errors import (
    INPUT_FORMAT_COLUMN_SEPERATOR,
    INPUT_FORMAT_STRICT,
    INPUT_FORMAT_STRING,
    SerDeConfigError,
)
from fldserde.core.format.models import DEFAULT_SEPARATOR

LIST_COLUMNS = "columns"
LIST_COLUMN_TYPES = "columns.types"

STRING_TYPE = "string"

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def parse_column_names(raw: Any) -> List[str]:
    if raw is None:
        return []
    if isinstance(raw, (list, tuple)):
        return [str(c).strip() for c in raw if str(c).strip()]
    return [c.strip() for c in str(raw).split(",") if c.strip()]


def parse_column_types(raw: Any) -> List[str]:
    """
    Split a type list such as ``string:string`` or ``string,map<string,int>``.

    Separators nested inside ``<...>`` or ``(...)`` belong to the enclosing type.
    """
    if raw is None:
        return []
    if isinstance(raw, (list, tuple)):
        return [str(t).strip().lower() for t in raw if str(t).strip()]

    out: List[str] = []
    depth = 0
    buf: List[str] = []
    for ch in str(raw):
        if ch in "<(":
            depth += 1
        elif ch in ">)":
            depth -= 1
        if ch in (":", ",") and depth == 0:
            out.append("".join(buf).strip().lower())
            buf = []
            continue
        buf.append(ch)
    tail = "".join(buf).strip().lower()
    if tail or out:
        out.append(tail)
    return [t for t in out if t]


def parse_flag(raw: Any, default: bool) -> bool:
    if raw is None:
        return default
    if isinstance(raw, bool):
        return raw
    v = str(raw).strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise SerDeConfigError(f"Invalid boolean for \"{INPUT_FORMAT_STRICT}\": {raw!r}")


class ColumnSchema(BaseModel):
    name: str
    type: str = STRING_TYPE


class SerDeProperties(BaseModel):
    columns: List[str]
    column_types: List[str] = Field(default_factory=list)
    format_string: Optional[str] = None
    separator: str = DEFAULT_SEPARATOR
    strict: bool = True

    @classmethod
    def from_table_properties(cls, props: Mapping[str, Any]) -> "SerDeProperties":
        columns = parse_column_names(props.get(LIST_COLUMNS))
        if not columns:
            raise SerDeConfigError(f"Table property \"{LIST_COLUMNS}\" is missing or empty")

        types = parse_column_types(props.get(LIST_COLUMN_TYPES))
        if not types:
            types = [STRING_TYPE] * len(columns)

        fmt = props.get(INPUT_FORMAT_STRING)
        sep = props.get(INPUT_FORMAT_COLUMN_SEPERATOR)

        return cls(
            columns=columns,
            column_types=types,
            format_string=None if fmt is None else str(fmt),
            separator=DEFAULT_SEPARATOR if sep is None else str(sep),
            strict=parse_flag(props.get(INPUT_FORMAT_STRICT), True),
        )

    def to_table_properties(self) -> Dict[str, str]:
        out = {
            LIST_COLUMNS: ",".join(self.columns),
            LIST_COLUMN_TYPES: ":".join(self.column_types),
            INPUT_FORMAT_COLUMN_SEPERATOR: self.separator,
            INPUT_FORMAT_STRICT: "true" if self.strict else "false",
        }
        if self.format_string is not None:
            out[INPUT_FORMAT_STRING] = self.format_string
        return out

    def column_schema(self) -> List[ColumnSchema]:
        return [ColumnSchema(name=n, type=t) for n, t in zip(self.columns, self.column_types)]


def check_string_columns(columns: List[str], column_types: List[str], *, owner: str = "TableSerDe") -> None:
    if len(columns) != len(column_types):
        raise SerDeConfigError(
            f"Table declares {len(columns)} columns but {len(column_types)} column types"
        )
    for c, (name, typ) in enumerate(zip(columns, column_types)):
        if typ != STRING_TYPE:
            raise SerDeConfigError(
                f"{owner} only accepts string columns, but column[{c}] named {name} has type {typ}"
            )
