from __future__ import annotations

from fastapi import FastAPI

from fldserde.api.endpoints import health
from fldserde.api.endpoints import metrics as metrics_ep
from fldserde.api.endpoints import metrics_export
from fldserde.api.endpoints.serde import router as serde_router
from fldserde.api.endpoints.tables import router as tables_router

from fldserde.api.middleware.error_shaping import SafeErrorMiddleware, install_error_handlers
from fldserde.api.middleware.request_context import RequestContextMiddleware


app = FastAPI(
    title="Fixed Length and Delimited SerDe API",
    version="0.1.0",
)

# ------------------------------------------------------------
# Middleware stack (ORDER MATTERS)
# Starlette reverses add_middleware order: the LAST call = OUTERMOST wrapper.
#   SafeErrorMiddleware -> RequestContext -> handler
# ------------------------------------------------------------
app.add_middleware(RequestContextMiddleware)
app.add_middleware(SafeErrorMiddleware)

# SerDeConfigError -> 400 {"detail": ...}
install_error_handlers(app)


app.include_router(health.router)
app.include_router(metrics_ep.router)
app.include_router(metrics_export.router)
app.include_router(serde_router)
app.include_router(tables_router)


@app.get("/health")
def health_check():
    return {"status": "healthy"}
