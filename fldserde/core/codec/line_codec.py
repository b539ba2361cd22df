from __future__ import annotations

from typing import Any, Optional, Sequence

from fldserde.core.format.compiler import compile_descriptor
from fldserde.core.format.models import Descriptor

from .decoder import RecordDecoder, Row
from .encoder import RecordEncoder


class LineCodec:
    """Decoder and encoder sharing one read-only Descriptor."""

    def __init__(self, descriptor: Descriptor, *, strict: bool = True, name: Optional[str] = None):
        self.descriptor = descriptor
        self.decoder = RecordDecoder(descriptor, strict=strict, name=name)
        self.encoder = RecordEncoder(descriptor)

    @classmethod
    def initialize(
        cls,
        format_string: Optional[str],
        separator: Optional[str],
        num_columns: int,
        *,
        strict: bool = True,
        name: Optional[str] = None,
    ) -> "LineCodec":
        """``separator=None`` selects the default ``#``."""
        descriptor = compile_descriptor(format_string, num_columns, separator)
        return cls(descriptor, strict=strict, name=name)

    @property
    def num_columns(self) -> int:
        return len(self.descriptor)

    @property
    def unmatched_count(self) -> int:
        return self.decoder.unmatched_count

    @property
    def partial_count(self) -> int:
        return self.decoder.partial_count

    def decode_line(self, line: str) -> Optional[Row]:
        return self.decoder.decode(line)

    def encode_row(self, values: Sequence[Any]) -> str:
        return self.encoder.encode(values)
