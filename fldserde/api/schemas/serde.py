from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from fldserde.core.format.models import DEFAULT_SEPARATOR


class FormatRequest(BaseModel):
    format_string: str
    num_columns: int
    separator: str = DEFAULT_SEPARATOR


class DecodeRequest(FormatRequest):
    lines: List[str] = Field(default_factory=list)
    strict: bool = True


class EncodeRequest(FormatRequest):
    rows: List[List[Optional[str]]] = Field(default_factory=list)


class DecodeResponse(BaseModel):
    rows: List[Optional[List[Optional[str]]]]
    matched: int
    unmatched: int
    partial: int


class EncodeResponse(BaseModel):
    lines: List[str]


class TableDecodeRequest(BaseModel):
    lines: List[str] = Field(default_factory=list)
    as_records: bool = False


class TableEncodeRequest(BaseModel):
    rows: List[Union[Dict[str, Optional[str]], List[Optional[str]]]] = Field(default_factory=list)


class RegisterTableRequest(BaseModel):
    description: Optional[str] = None
    properties: Dict[str, Any]
