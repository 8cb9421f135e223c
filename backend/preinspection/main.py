from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from .middleware.request_context import RequestContextMiddleware
from .modules.boundaries import check_module_boundaries
from .modules.catalog import default_module_factories
from .modules.composition import CompositionRoot, bootstrap
from .modules.errors import ContractViolationError, ModuleNotFoundError, ModuleRegistryError
from .observability.logging import configure_logging, get_logger
from .observability.otel import configure_otel, instrument_app
from .responses import error_response
from .routers.health import router as health_router
from .routers.modules import router as modules_router
from .settings import Settings, get_settings


def build_composition(settings: Settings) -> CompositionRoot:
    """Wire every production module. Raises on any bootstrap failure."""
    if settings.enforce_module_boundaries:
        violations = check_module_boundaries()
        if violations:
            raise ContractViolationError(
                message="Module boundary violations: " + "; ".join(str(v) for v in violations)
            )
    return bootstrap(default_module_factories(), settings=settings)


def create_app(
    settings: Settings | None = None,
    *,
    composition: CompositionRoot | None = None,
) -> FastAPI:
    settings = settings or get_settings()

    # Logging must be configured before the app starts handling requests.
    configure_logging(
        level=settings.log_level,
        service=settings.service_name,
        environment=settings.normalized_environment,
    )
    log = get_logger("startup")
    log.info("app_starting", settings=settings.to_log_safe_dict())

    # Optional tracing (no-op unless OTEL_ENABLED=true)
    tracing = configure_otel(settings)

    if composition is None:
        composition = build_composition(settings)

    app = FastAPI(
        title="C2B Pre-Inspection Service",
        version=settings.service_version,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.composition = composition

    # Outermost: request id and access log wrap everything.
    app.add_middleware(RequestContextMiddleware, access_log=settings.access_log_enabled)

    # Error handlers
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(ModuleRegistryError, _module_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_exception_handler)

    # Routes
    app.include_router(health_router)
    app.include_router(modules_router, prefix="/modules")

    if tracing:
        # Instrument after routers/middleware are attached.
        instrument_app(app)

    log.info("app_started", modules=composition.registry.names())
    return app


def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    status_code = int(getattr(exc, "status_code", 500) or 500)
    detail = getattr(exc, "detail", None)

    message: str | None = None
    if isinstance(detail, dict):
        msg = detail.get("message")
        if isinstance(msg, str) and msg.strip():
            message = msg.strip()
    elif detail is not None:
        message = str(detail)

    if status_code == 404 and message in (None, "Not Found"):
        message = "Route not found"

    return error_response(request=request, status_code=status_code, message=message)


def _validation_error_handler(request: Request, exc: RequestValidationError) -> Response:
    fields: list[str] = []
    for err in exc.errors():
        loc = err.get("loc") or ()
        fields.append(".".join(str(p) for p in loc))
    message = "Validation Failed"
    if fields:
        message += ": " + ", ".join(fields)
    return error_response(request=request, status_code=422, message=message)


def _module_error_handler(request: Request, exc: ModuleRegistryError) -> Response:
    # Unknown modules at request time degrade to a 404; anything else is a server bug.
    if isinstance(exc, ModuleNotFoundError):
        return error_response(request=request, status_code=404, message=str(exc))
    get_logger("errors").error(
        "module_registry_error",
        error=str(exc),
        error_type=type(exc).__name__,
        module=exc.module,
        path=request.url.path,
    )
    return error_response(request=request, status_code=500, message=str(exc))


def _unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    get_logger("errors").error(
        "unhandled_exception",
        path=request.url.path,
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return error_response(request=request, status_code=500, message=str(exc) or None)
