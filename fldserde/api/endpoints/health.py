from __future__ import annotations

from fastapi import APIRouter

from fldserde.core.observability.metrics import inc_named

router = APIRouter()


@router.get("/api/v1/health/live")
def liveness():
    inc_named("health_live")
    return {"status": "alive"}


@router.get("/api/v1/health/ready")
def readiness():
    """Ready once the table registry has loaded."""
    from fldserde.api.endpoints.tables import registry

    inc_named("health_ready")
    return {"status": "ready", "tables": len(registry.list_names())}
