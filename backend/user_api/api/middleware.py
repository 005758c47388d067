"""HTTP Middleware — request IDs and access logging.

Invariants:
    - Every response carries X-Request-ID (incoming value reused, else a fresh UUID4)
    - request_id_var is set for the whole request and reset afterwards
    - Exactly one "Incoming request" and one "Request completed" record per request

Design Decisions:
    - Function middlewares via app.middleware("http"): registration order decides
      nesting — the last registered runs outermost, so request_id wraps access_log
    - access_log re-raises unhandled exceptions; request_id turns them into the generic
      500 response itself, inside the request-id context, so the header is still set
"""

import logging
import time
import uuid

from fastapi import FastAPI, Request

from user_api.api.error_handlers import internal_error_response
from user_api.infrastructure.observability import request_id_var

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def register_middleware(app: FastAPI) -> None:
    """Register request-scoped middlewares on the FastAPI app."""

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        start = time.perf_counter()
        client_ip = request.client.host if request.client else None
        logger.info(
            "Incoming request",
            extra={
                "method": request.method,
                "path": request.url.path,
                "client_ip": client_ip,
            },
        )
        try:
            response = await call_next(request)
        except Exception:
            logger.error(
                "Request failed",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status": 500,
                    "duration_ms": _elapsed_ms(start),
                },
            )
            raise
        logger.info(
            "Request completed",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "duration_ms": _elapsed_ms(start),
            },
        )
        return response

    @app.middleware("http")
    async def request_id(request: Request, call_next):
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        token = request_id_var.set(rid)
        try:
            response = await call_next(request)
        except Exception as exc:
            response = internal_error_response(request, exc)
        finally:
            request_id_var.reset(token)
        response.headers[REQUEST_ID_HEADER] = rid
        return response


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)
