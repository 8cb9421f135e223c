from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..dependencies import get_composition, resolve_module
from ..modules.composition import CompositionRoot
from ..modules.contract import ModuleContract
from ..responses import envelope_response
from ..shared.envelope import success

router = APIRouter(tags=["modules"])


@router.get("")
def list_modules(composition: CompositionRoot = Depends(get_composition)) -> JSONResponse:
    return envelope_response(success(composition.describe_modules()))


@router.get("/{name}")
def get_module(contract: ModuleContract = Depends(resolve_module)) -> JSONResponse:
    # ModuleNotFoundError is rendered as a 404 envelope by the app's exception handler.
    return envelope_response(success(contract.describe()))
