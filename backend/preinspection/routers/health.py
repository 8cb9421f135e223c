from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..dependencies import get_app_settings, get_composition
from ..modules.composition import CompositionRoot
from ..responses import envelope_response
from ..settings import Settings
from ..shared.envelope import success

router = APIRouter(tags=["health"])


@router.get("/")
def service_info(
    composition: CompositionRoot = Depends(get_composition),
    settings: Settings = Depends(get_app_settings),
) -> JSONResponse:
    return envelope_response(
        success(
            {
                "service": settings.service_name,
                "version": settings.service_version,
                "environment": settings.normalized_environment,
                "modules": composition.registry.names(),
            }
        )
    )


@router.get("/health")
@router.get("/actuator/health", include_in_schema=False)
def health(composition: CompositionRoot = Depends(get_composition)) -> JSONResponse:
    # Always 200: a degraded module is an observed fact, not a failed probe.
    return envelope_response(composition.aggregate_health())
