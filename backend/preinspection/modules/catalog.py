from __future__ import annotations

from .composition import ModuleFactory
from . import appointment, assignment, attendance, core, location, pipeline


def default_module_factories() -> list[tuple[str, ModuleFactory]]:
    """
    Production module set, in bootstrap order.

    A module may only resolve modules listed above it.
    """
    return [
        ("core", core.build),
        ("location", location.build),
        ("assignment", assignment.build),
        ("pipeline", pipeline.build),
        ("attendance", attendance.build),
        ("appointment", appointment.build),
    ]
