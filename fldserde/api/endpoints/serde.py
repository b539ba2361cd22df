from __future__ import annotations

from fastapi import APIRouter

from fldserde.api.schemas.serde import (
    DecodeRequest,
    DecodeResponse,
    EncodeRequest,
    EncodeResponse,
    FormatRequest,
)
from fldserde.core.codec.line_codec import LineCodec
from fldserde.core.format.compiler import compile_descriptor


# SerDeConfigError raised below is mapped to 400 by the app error handler.
router = APIRouter(prefix="/api/v1/serde", tags=["serde"])


@router.post("/compile")
def compile_format(req: FormatRequest):
    descriptor = compile_descriptor(req.format_string, req.num_columns, req.separator)
    return {
        "format_string": descriptor.format_string,
        "canonical": descriptor.render(),
        "separator": descriptor.separator,
        "columns": descriptor.describe(),
    }


@router.post("/decode", response_model=DecodeResponse)
def decode_lines(req: DecodeRequest):
    codec = LineCodec.initialize(req.format_string, req.separator, req.num_columns, strict=req.strict)
    rows = [codec.decode_line(line) for line in req.lines]
    return DecodeResponse(
        rows=rows,
        matched=sum(1 for r in rows if r is not None),
        unmatched=codec.unmatched_count,
        partial=codec.partial_count,
    )


@router.post("/encode", response_model=EncodeResponse)
def encode_rows(req: EncodeRequest):
    codec = LineCodec.initialize(req.format_string, req.separator, req.num_columns)
    return EncodeResponse(lines=[codec.encode_row(row) for row in req.rows])
