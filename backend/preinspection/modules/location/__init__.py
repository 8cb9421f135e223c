"""Location module: inspection locations and addresses."""

from .client import LocationClient
from .module import build

__all__ = ["LocationClient", "build"]
