"""Cross-cutting value types shared by every module."""

from .envelope import ResponseEnvelope, error, success

__all__ = ["ResponseEnvelope", "error", "success"]
