from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from .settings import get_settings
from .shared.envelope import ResponseEnvelope, error


def _default_message(status_code: int) -> str:
    if status_code == 400:
        return "Bad Request"
    if status_code == 401:
        return "Unauthorized"
    if status_code == 403:
        return "Forbidden"
    if status_code == 404:
        return "Not Found"
    if status_code == 405:
        return "Method Not Allowed"
    if status_code == 422:
        return "Validation Failed"
    if status_code >= 500:
        return "Internal Server Error"
    return "Error"


def _request_id(request: Request) -> str | None:
    rid = getattr(getattr(request, "state", None), "request_id", None)
    if rid:
        return str(rid)
    hdr = request.headers.get("x-request-id")
    return str(hdr) if hdr else None


def envelope_response(envelope: ResponseEnvelope[Any], *, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=int(status_code), content=envelope.to_dict())


def error_response(
    *,
    request: Request,
    status_code: int,
    message: str | None = None,
) -> JSONResponse:
    """
    Render a failure as an error envelope.

    Server-error messages are replaced with a generic one in production so
    internal details never reach the wire.
    """
    settings = getattr(request.app.state, "settings", None) or get_settings()

    safe_message = message
    if int(status_code) >= 500 and settings.is_production:
        safe_message = None

    response = envelope_response(
        error(safe_message or _default_message(int(status_code))),
        status_code=status_code,
    )
    rid = _request_id(request)
    if rid:
        response.headers["X-Request-Id"] = rid
    return response
