from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from fldserde.core.errors import SerDeConfigError

from .loader import TableDefinition, load_table_definition
from .table_serde import TableSerDe

log = logging.getLogger("fldserde.registry")

TABLE_SUFFIXES = (".yaml", ".yml", ".json")


def builtin_tables() -> list[TableDefinition]:
    return [
        TableDefinition(
            name="sample_fixed_delimited",
            description="Two fixed columns, two delimited columns, one fixed tail",
            properties={
                "columns": "id,name,event_date,amount,note",
                "columns.types": "string:string:string:string:string",
                "input.format.string": "FL2#FL10#DM|#DM,#FL20",
                "input.format.column.seperator": "#",
            },
        ),
    ]


class TableRegistry:
    """Table definitions and their initialized serdes.

    Resolution order:
      1) Built-in tables (always present)
      2) templates/tables/*.yaml|*.yml|*.json under the project root,
         or the directory named by FLDSERDE_TABLES_DIR
    """

    def __init__(self, project_root: Path, tables_dir: Optional[Path] = None):
        self.project_root = project_root
        self.tables_dir = tables_dir
        self._definitions: Dict[str, TableDefinition] = {}
        self._serdes: Dict[str, TableSerDe] = {}
        self._load_all()

    def _resolve_dir(self) -> Path:
        if self.tables_dir is not None:
            return Path(self.tables_dir)
        env_dir = os.getenv("FLDSERDE_TABLES_DIR", "").strip()
        if env_dir:
            return Path(env_dir)
        return self.project_root / "templates" / "tables"

    def _load_all(self) -> None:
        self._definitions = {}
        self._serdes = {}
        for d in builtin_tables():
            self._add(d)

        tables_dir = self._resolve_dir()
        if not tables_dir.exists():
            return

        for p in sorted(tables_dir.iterdir()):
            if p.suffix.lower() not in TABLE_SUFFIXES:
                continue
            try:
                self._add(load_table_definition(p))
            except SerDeConfigError as exc:
                # Optional files: a broken one must not hide the others.
                log.warning("Skipping table definition %s: %s", p, exc)

    def _add(self, definition: TableDefinition) -> TableSerDe:
        serde = TableSerDe(definition.name).initialize(definition.properties)
        self._definitions[definition.name] = definition
        self._serdes[definition.name] = serde
        return serde

    def list_names(self) -> List[str]:
        return sorted(self._definitions.keys())

    def get(self, name: str) -> Optional[TableDefinition]:
        return self._definitions.get(name)

    def serde(self, name: str) -> Optional[TableSerDe]:
        return self._serdes.get(name)

    def register(
        self,
        name: str,
        properties: Mapping[str, Any],
        description: Optional[str] = None,
    ) -> TableSerDe:
        """Validate and add (or replace) a table. Raises SerDeConfigError."""
        serde = self._add(TableDefinition(name=name, description=description, properties=dict(properties)))
        log.info("Registered table %s (%d columns)", name, len(serde.column_names))
        return serde
