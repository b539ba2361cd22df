from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from fldserde.core.format.models import Descriptor, FixedColumn

from .throttle import ThrottledCounter

log = logging.getLogger("fldserde.serde")

Row = List[Optional[str]]


@dataclass
class WalkResult:
    values: Row = field(default_factory=list)
    # Input ran out before every column was read; trailing slots hold None.
    exhausted: bool = False
    error: Optional[Exception] = None


def walk_line(descriptor: Descriptor, line: str) -> WalkResult:
    """
    Read columns left to right from ``line``.

    Never raises: an unexpected failure is reported through ``error`` together
    with whatever was read before it.
    """
    n = len(descriptor)
    values: Row = []
    try:
        cursor = 0
        total = len(line)
        for col in descriptor.columns:
            if isinstance(col, FixedColumn):
                end = cursor + col.length
                if end > total:
                    values.extend([None] * (n - len(values)))
                    return WalkResult(values=values, exhausted=True)
                values.append(line[cursor:end])
                cursor = end
            elif col.rest_of_line:
                values.append(line[cursor:])
                return WalkResult(values=values)
            else:
                pos = line.find(col.delimiter, cursor)
                if pos == -1:
                    values.extend([None] * (n - len(values)))
                    return WalkResult(values=values, exhausted=True)
                values.append(line[cursor:pos])
                cursor = pos + len(col.delimiter)
    except Exception as e:
        # Reported by the caller through the throttled counters.
        log.debug("error processing row %r: %s", line, e)
        return WalkResult(values=values, error=e)
    return WalkResult(values=values)


class RecordDecoder:
    """
    Decodes one raw line at a time against a compiled Descriptor.

    ``strict`` (default) drops rows that ran out of input. With
    ``strict=False`` such rows are returned with None in the unread slots.
    Rows that produced fewer than N values are dropped in both modes.
    ``name`` tags the throttled warnings (a table name, for instance).
    """

    def __init__(self, descriptor: Descriptor, *, strict: bool = True, name: Optional[str] = None):
        self.descriptor = descriptor
        self.strict = strict
        self.name = name or descriptor.format_string
        self._unmatched = ThrottledCounter("unmatched")
        self._partial = ThrottledCounter("partial")

    @property
    def num_columns(self) -> int:
        return len(self.descriptor)

    @property
    def unmatched_count(self) -> int:
        return self._unmatched.count

    @property
    def partial_count(self) -> int:
        return self._partial.count

    def decode(self, line: str) -> Optional[Row]:
        result = walk_line(self.descriptor, line)

        if result.error is not None and result.values:
            count, report = self._partial.increment()
            if report:
                log.warning(
                    "[%s] %d partially unmatched rows are found, cannot find column number %d: %r (%s)",
                    self.name,
                    count,
                    len(result.values),
                    line,
                    result.error,
                )

        if (
            result.error is not None
            or len(result.values) != self.num_columns
            or (self.strict and result.exhausted)
        ):
            self._reject(line, result.error)
            return None

        return result.values

    def _reject(self, line: str, error: Optional[Exception] = None) -> None:
        count, report = self._unmatched.increment()
        if not report:
            return
        if error is not None:
            log.warning("[%s] %d unmatched rows are found: %r (%s)", self.name, count, line, error)
        else:
            log.warning("[%s] %d unmatched rows are found: %r", self.name, count, line)
