"""Appointment module: inspection slots. Depends on `location` and `pipeline`."""

from .client import AppointmentClient
from .module import build

__all__ = ["AppointmentClient", "build"]
