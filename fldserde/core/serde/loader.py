"""
Table definition loader.

Reads a YAML or JSON table definition:

    name: web_events
    description: Raw web events export
    properties:
      columns: id,name,event_date,amount,note
      columns.types: string:string:string:string:string
      input.format.string: "FL2#FL10#DM|#DM,#FL20"
      input.format.column.seperator: "#"

Property values are kept as given; validation happens when the table serde
is initialized.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from fldserde.core.errors import SerDeConfigError


class TableDefinition(BaseModel):
    name: str
    description: Optional[str] = None
    properties: Dict[str, Any] = Field(default_factory=dict)


def parse_table_definition(raw_text: str, *, source: str = "<string>") -> TableDefinition:
    # JSON first, YAML for everything else
    try:
        data = json.loads(raw_text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise SerDeConfigError(f"Failed to parse table definition {source} as JSON or YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise SerDeConfigError(
            f"Table definition {source} must be a mapping, got {type(data).__name__}"
        )

    try:
        return TableDefinition(**data)
    except ValidationError as exc:
        raise SerDeConfigError(f"Invalid table definition {source}: {exc}") from exc


def load_table_definition(path: Path) -> TableDefinition:
    p = Path(path)
    try:
        raw_text = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise SerDeConfigError(f"Cannot read table definition {p}: {exc}") from exc
    return parse_table_definition(raw_text, source=str(p))
