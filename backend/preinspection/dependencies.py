from __future__ import annotations

from fastapi import Depends, Request

from .modules.composition import CompositionRoot
from .modules.contract import ModuleContract
from .settings import Settings


def get_composition(request: Request) -> CompositionRoot:
    return request.app.state.composition


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def resolve_module(
    name: str,
    request: Request,
    composition: CompositionRoot = Depends(get_composition),
) -> ModuleContract:
    # Recorded before resolving so the access log names unknown modules too.
    request.state.module = name
    return composition.resolve(name)
