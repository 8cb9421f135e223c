"""Assignment module: allocating inspections to inspectors. Depends on `location`."""

from .client import AssignmentClient
from .module import build

__all__ = ["AssignmentClient", "build"]
