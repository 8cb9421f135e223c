"""Pipeline module: lead progression through inspection stages. Depends on `assignment`."""

from .client import PipelineClient
from .module import build

__all__ = ["PipelineClient", "build"]
