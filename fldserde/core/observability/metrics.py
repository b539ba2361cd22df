from __future__ import annotations

from collections import Counter
from typing import Dict

from prometheus_client import Counter as PromCounter

# Named counters (custom)
_NAMED = Counter()

_PROM_ROWS = PromCounter(
    "fldserde_rows_total",
    "Rows processed by table serdes",
    ["table", "outcome"],
)


def reset_metrics() -> None:
    """
    Test helper: clears named counters to avoid cross-test leakage.
    Prometheus counters are process-wide and are not reset.
    """
    _NAMED.clear()


def inc_named(name: str, value: int = 1) -> None:
    if not name:
        return
    _NAMED[name] += int(value)


def inc_rows(table: str, outcome: str, value: int = 1) -> None:
    """Count a decode/encode outcome for a table (decoded, unmatched, encoded)."""
    t = table or "unknown"
    _NAMED[f"rows_{outcome}"] += int(value)
    _NAMED[f"table_{t}|{outcome}"] += int(value)
    _PROM_ROWS.labels(table=t, outcome=outcome).inc(value)


def snapshot_named() -> Dict[str, int]:
    return dict(_NAMED)
