from __future__ import annotations

import logging
import sys
from typing import Any, Callable

import structlog

from .context import get_module, get_request_id

Processor = Callable[[Any, str, dict], dict]

_CONFIGURED = False


def add_request_context(_: Any, __: str, event_dict: dict) -> dict:
    """Attach the current request id and owning module, unless the call site already set them."""
    rid = get_request_id()
    if rid:
        event_dict.setdefault("request_id", rid)
    module = get_module()
    if module:
        event_dict.setdefault("module", module)
    return event_dict


def service_fields(*, service: str | None, environment: str | None) -> Processor:
    static = {k: v for k, v in (("service", service), ("environment", environment)) if v}

    def _add(_: Any, __: str, event_dict: dict) -> dict:
        for k, v in static.items():
            event_dict.setdefault(k, v)
        return event_dict

    return _add


def _shared_processors(service: str | None, environment: str | None) -> list[Processor]:
    return [
        add_request_context,
        service_fields(service=service, environment=environment),
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def configure_logging(
    *,
    level: str | int = "INFO",
    service: str | None = None,
    environment: str | None = None,
) -> None:
    """
    Route structlog and stdlib logging (uvicorn included) to JSON lines on stdout.

    Every line carries the service name and environment; lines emitted while a
    request or a module factory is running also carry `request_id` / `module`.
    Only the first call takes effect.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    shared = _shared_processors(service, environment)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=shared,
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level.upper() if isinstance(level, str) else level)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uv = logging.getLogger(name)
        uv.handlers = []
        uv.propagate = True

    structlog.configure(
        processors=[
            *shared,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    _CONFIGURED = True


def get_logger(name: str | None = None):
    return structlog.get_logger(name)
