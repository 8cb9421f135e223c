"""Core module: shared utilities (clock) other modules may depend on."""

from .client import CoreClient
from .module import build

__all__ = ["CoreClient", "build"]
