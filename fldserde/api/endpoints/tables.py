from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, HTTPException

from fldserde.api.schemas.serde import RegisterTableRequest, TableDecodeRequest, TableEncodeRequest
from fldserde.core.serde.registry import TableRegistry
from fldserde.core.serde.table_serde import TableSerDe


router = APIRouter(prefix="/api/v1/tables", tags=["tables"])

PROJECT_ROOT = Path(__file__).resolve().parents[3]

registry = TableRegistry(PROJECT_ROOT)


def _serde_or_404(name: str) -> TableSerDe:
    serde = registry.serde(name)
    if serde is None:
        raise HTTPException(status_code=404, detail="Table not found")
    return serde


@router.get("")
def list_tables():
    return {"tables": registry.list_names()}


@router.get("/{name}")
def get_table(name: str):
    serde = _serde_or_404(name)
    definition = registry.get(name)
    return {
        "name": name,
        "description": definition.description if definition else None,
        "schema": serde.schema(),
        "properties": serde.properties.to_table_properties(),
        "unmatched_rows": serde.unmatched_count,
        "partial_rows": serde.partial_count,
    }


@router.post("/{name}")
def register_table(name: str, req: RegisterTableRequest):
    serde = registry.register(name, req.properties, description=req.description)
    return {"name": name, "schema": serde.schema()}


@router.post("/{name}/decode")
def decode_table_lines(name: str, req: TableDecodeRequest):
    serde = _serde_or_404(name)
    if req.as_records:
        rows = [serde.deserialize_record(line) for line in req.lines]
    else:
        rows = [serde.deserialize(line) for line in req.lines]

    return {
        "name": name,
        "rows": rows,
        "matched": sum(1 for r in rows if r is not None),
        "unmatched_rows": serde.unmatched_count,
        "partial_rows": serde.partial_count,
    }


@router.post("/{name}/encode")
def encode_table_rows(name: str, req: TableEncodeRequest):
    serde = _serde_or_404(name)
    return {"name": name, "lines": [serde.serialize(row) for row in req.rows]}
