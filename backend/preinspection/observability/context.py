from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)

# Name of the module whose factory or health check is currently running.
module_var: ContextVar[str | None] = ContextVar("module", default=None)


def get_request_id() -> str | None:
    return request_id_var.get()


def get_module() -> str | None:
    return module_var.get()


@contextmanager
def module_scope(name: str) -> Iterator[str]:
    """Attribute every log line emitted inside the block to module `name`."""
    token = module_var.set(name)
    try:
        yield name
    finally:
        module_var.reset(token)
