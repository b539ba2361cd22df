from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from fldserde.core.codec.decoder import Row
from fldserde.core.codec.line_codec import LineCodec
from fldserde.core.errors import INPUT_FORMAT_STRING, SerDeConfigError
from fldserde.core.observability.metrics import inc_rows

from .properties import SerDeProperties, check_string_columns

log = logging.getLogger("fldserde.serde")


class TableSerDe:
    """
    Binds a LineCodec to a table definition.

    The table declares its columns (all ``string``) and the
    ``input.format.string`` descriptor. A table without a descriptor can be
    initialized, but reading or writing it is a configuration error.
    """

    def __init__(self, name: str = "default"):
        self.name = name
        self.properties: Optional[SerDeProperties] = None
        self.codec: Optional[LineCodec] = None

    def initialize(self, properties: Union[SerDeProperties, Mapping[str, Any]]) -> "TableSerDe":
        if not isinstance(properties, SerDeProperties):
            properties = SerDeProperties.from_table_properties(properties)

        check_string_columns(properties.columns, properties.column_types, owner=type(self).__name__)

        self.properties = properties
        self.codec = None
        if properties.format_string:
            self.codec = LineCodec.initialize(
                properties.format_string,
                properties.separator,
                len(properties.columns),
                strict=properties.strict,
                name=self.name,
            )
        else:
            log.info("table %s has no %s; reads and writes will fail", self.name, INPUT_FORMAT_STRING)
        return self

    # --- metadata -----------------------------------------------------

    @property
    def column_names(self) -> List[str]:
        return list(self._props().columns)

    def schema(self) -> List[Dict[str, str]]:
        return [c.model_dump() for c in self._props().column_schema()]

    def serialized_class(self) -> type:
        return str

    def serde_stats(self) -> None:
        return None

    @property
    def unmatched_count(self) -> int:
        return self.codec.unmatched_count if self.codec else 0

    @property
    def partial_count(self) -> int:
        return self.codec.partial_count if self.codec else 0

    # --- read ---------------------------------------------------------

    def deserialize(self, line: str) -> Optional[Row]:
        if self.codec is None:
            self._props()
            raise SerDeConfigError(f"This table does not have serde property \"{INPUT_FORMAT_STRING}\"!")

        row = self.codec.decode_line(line)
        inc_rows(self.name, "decoded" if row is not None else "unmatched")
        return row

    def deserialize_record(self, line: str) -> Optional[Dict[str, Optional[str]]]:
        row = self.deserialize(line)
        if row is None:
            return None
        return dict(zip(self.column_names, row))

    # --- write --------------------------------------------------------

    def serialize(self, row: Union[Sequence[Any], Mapping[str, Any]]) -> str:
        if self.codec is None:
            self._props()
            raise SerDeConfigError(
                f"Cannot write data into table because \"{INPUT_FORMAT_STRING}\" "
                "is not specified in serde properties of the table."
            )

        if isinstance(row, Mapping):
            missing = [c for c in self.column_names if c not in row]
            if missing:
                raise SerDeConfigError(f"Cannot serialize the object because columns are missing: {missing}")
            values = [row[c] for c in self.column_names]
        else:
            values = row

        line = self.codec.encode_row(values)
        inc_rows(self.name, "encoded")
        return line

    def _props(self) -> SerDeProperties:
        if self.properties is None:
            raise SerDeConfigError(f"{type(self).__name__} {self.name!r} is not initialized")
        return self.properties
