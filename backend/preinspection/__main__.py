from __future__ import annotations

import sys

import uvicorn

from .main import create_app
from .modules.errors import ModuleRegistryError
from .observability.logging import configure_logging, get_logger
from .settings import get_settings


def main() -> int:
    settings = get_settings()
    configure_logging(
        level=settings.log_level,
        service=settings.service_name,
        environment=settings.normalized_environment,
    )
    log = get_logger("startup")

    # Bootstrap eagerly so a broken module graph fails the process, not the first request.
    try:
        app = create_app(settings)
    except ModuleRegistryError as e:
        log.error("bootstrap_failed", error=str(e), error_type=type(e).__name__, module=e.module)
        return 1

    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
