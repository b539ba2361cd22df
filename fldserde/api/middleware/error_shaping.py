from __future__ import annotations

import logging
import traceback
from typing import Callable, Optional

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from fldserde.core.errors import SerDeConfigError

log = logging.getLogger("fldserde.errors")


def _request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None) or request.headers.get("x-request-id")


def _payload(detail: str, rid: Optional[str]) -> dict:
    payload = {"detail": detail}
    if rid:
        payload["request_id"] = rid
    return payload


async def serde_config_error_handler(request: Request, exc: SerDeConfigError) -> JSONResponse:
    """Bad format string, schema or row width: the caller's fault, reported as 400."""
    rid = _request_id(request)
    log.info("serde configuration error rid=%s path=%s: %s", rid, request.url.path, exc)
    return JSONResponse(status_code=400, content=_payload(str(exc), rid))


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SerDeConfigError, serde_config_error_handler)


class SafeErrorMiddleware(BaseHTTPMiddleware):
    """
    Last resort for anything the handlers above did not map.
    Clients get a 500 with the request id and never a traceback; the
    traceback is logged server-side.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            rid = _request_id(request)
            log.error(
                "Unhandled error: %s rid=%s path=%s\n%s",
                str(e),
                rid,
                request.url.path,
                traceback.format_exc(),
            )
            return JSONResponse(status_code=500, content=_payload("Internal Server Error", rid))
