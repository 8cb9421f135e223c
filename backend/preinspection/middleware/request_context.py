from __future__ import annotations

import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from ..observability.context import request_id_var
from ..observability.logging import get_logger


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000.0, 2)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Request id propagation plus the structured access log.

    The inbound `X-Request-Id` is reused when present, otherwise a UUIDv4 is
    generated; either way it lands on `request.state`, in the logging context
    and on the response. Routes that act on a single module record its name on
    `request.state.module` so the `request` event says which module was hit,
    including lookups of modules that do not exist.
    """

    header_name = "X-Request-Id"

    def __init__(self, app, *, access_log: bool = True, exclude_paths: set[str] | None = None):
        super().__init__(app)
        self._access_log = access_log
        self._exclude = exclude_paths or set()
        self._log = get_logger("access")

    async def dispatch(self, request: Request, call_next):
        inbound = (request.headers.get("x-request-id") or "").strip()
        request_id = inbound or str(uuid.uuid4())
        request.state.request_id = request_id

        log_this = self._access_log and request.url.path not in self._exclude
        start = time.perf_counter()
        token = request_id_var.set(request_id)
        try:
            try:
                response = await call_next(request)
            except Exception:
                if log_this:
                    self._log.exception("request_error", **self._fields(request), duration_ms=_elapsed_ms(start))
                raise

            response.headers[self.header_name] = request_id
            if log_this:
                self._log.info(
                    "request",
                    **self._fields(request),
                    status_code=response.status_code,
                    duration_ms=_elapsed_ms(start),
                )
            return response
        finally:
            request_id_var.reset(token)

    @staticmethod
    def _fields(request: Request) -> dict:
        client = request.client
        return {
            "http_method": request.method.upper(),
            "path": request.url.path,
            "module": getattr(request.state, "module", None),
            "client_ip": client.host if client else None,
        }
