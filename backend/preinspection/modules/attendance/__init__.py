"""Attendance module: inspector check-in / check-out. Depends on `core` for time."""

from .client import AttendanceClient
from .module import build

__all__ = ["AttendanceClient", "build"]
