from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


# A delimiter equal to this sentinel consumes the rest of the line.
LINE_TERMINATOR = "\n"

DEFAULT_SEPARATOR = "#"


@dataclass(frozen=True)
class FixedColumn:
    length: int

    @property
    def kind(self) -> str:
        return "FL"

    def token(self) -> str:
        return f"FL{self.length}"


@dataclass(frozen=True)
class DelimitedColumn:
    delimiter: str

    @property
    def kind(self) -> str:
        return "DM"

    @property
    def rest_of_line(self) -> bool:
        return self.delimiter == LINE_TERMINATOR

    def token(self) -> str:
        return f"DM{self.delimiter}"


ColumnSpec = Union[FixedColumn, DelimitedColumn]


@dataclass(frozen=True)
class Descriptor:
    columns: Tuple[ColumnSpec, ...]
    format_string: str
    separator: str = DEFAULT_SEPARATOR

    def __len__(self) -> int:
        return len(self.columns)

    def __iter__(self):
        return iter(self.columns)

    @property
    def num_columns(self) -> int:
        return len(self.columns)

    def render(self) -> str:
        """Canonical format string (upper-case prefixes, same separator)."""
        return self.separator.join(c.token() for c in self.columns)

    def describe(self) -> list[dict]:
        out: list[dict] = []
        for i, c in enumerate(self.columns):
            if isinstance(c, FixedColumn):
                out.append({"index": i, "kind": c.kind, "length": c.length})
            else:
                out.append(
                    {
                        "index": i,
                        "kind": c.kind,
                        "delimiter": c.delimiter,
                        "rest_of_line": c.rest_of_line,
                    }
                )
        return out
