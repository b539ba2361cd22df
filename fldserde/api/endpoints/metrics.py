from fastapi import APIRouter
from fldserde.core.observability.metrics import snapshot_named

router = APIRouter()


@router.get("/api/v1/metrics/snapshot")
def metrics_snapshot():
    named = snapshot_named()
    body = {
        "requests": {k: v for k, v in named.items() if k.startswith("requests_")},
        "rows": {k: v for k, v in named.items() if k.startswith("rows_") or k.startswith("table_")},
    }
    for k in ("requests_total", "rows_decoded", "rows_unmatched", "rows_encoded"):
        if k in named:
            body[k] = named[k]
    return body
