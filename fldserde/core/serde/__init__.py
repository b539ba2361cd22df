from .properties import SerDeProperties, ColumnSchema, check_string_columns
from .table_serde import TableSerDe
from .loader import TableDefinition, load_table_definition, parse_table_definition
from .registry import TableRegistry, builtin_tables

__all__ = [
    "ColumnSchema",
    "SerDeProperties",
    "TableDefinition",
    "TableRegistry",
    "TableSerDe",
    "builtin_tables",
    "check_string_columns",
    "load_table_definition",
    "parse_table_definition",
]
