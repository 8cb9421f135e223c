"""
Uniform result envelope.

Every value crossing a module contract or leaving the process over HTTP is
wrapped in a `ResponseEnvelope`. Build envelopes with `success()` / `error()`
rather than calling the constructor directly.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

T = TypeVar("T")


class ResponseEnvelope(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True)

    success: bool
    message: str | None = None
    data: T | None = None

    @model_validator(mode="after")
    def _check_shape(self) -> "ResponseEnvelope[T]":
        if not self.success:
            if self.data is not None:
                raise ValueError("error envelopes must not carry data")
            if self.message is None:
                raise ValueError("error envelopes require a message")
        return self

    def to_dict(self) -> dict[str, Any]:
        """Wire shape: all three keys are always present."""
        return self.model_dump(mode="json")


def success(data: T) -> ResponseEnvelope[T]:
    return ResponseEnvelope(success=True, message=None, data=data)


def error(message: str) -> ResponseEnvelope[Any]:
    # Callers must not read `data` from a failed envelope.
    return ResponseEnvelope(success=False, message=message, data=None)
