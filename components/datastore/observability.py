from __future__ import annotations

import logging
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

log = logging.getLogger("datastore.http")

REQUEST_ID_HEADER = "x-request-id"


def _route_of(request: Request) -> str:
    # Routing fills scope["route"] while the request passes through the app
    route = request.scope.get("route")
    return getattr(route, "path", request.url.path)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tags every request with an id and logs one line per datastore call."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.perf_counter()
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id

        try:
            response: Response = await call_next(request)
        except Exception:
            log.exception(
                "request_failed request_id=%s method=%s route=%s key=%s ms=%.2f",
                request_id, request.method, _route_of(request),
                request.path_params.get("key"), (time.perf_counter() - start) * 1000,
            )
            raise

        response.headers[REQUEST_ID_HEADER] = request_id
        log.info(
            "request_done request_id=%s method=%s route=%s key=%s status=%d ms=%.2f",
            request_id, request.method, _route_of(request),
            request.path_params.get("key"), response.status_code,
            (time.perf_counter() - start) * 1000,
        )
        return response
