from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=None, extra="ignore")

    # Runtime
    environment: str = Field(default="development", validation_alias="APP_ENV")
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=8080, validation_alias="PORT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    access_log_enabled: bool = Field(default=True, validation_alias="ACCESS_LOG_ENABLED")

    # Service identity (reported by the root endpoint and tracing)
    service_name: str = Field(
        default="c2b-pre-inspection-service", validation_alias="SERVICE_NAME"
    )
    service_version: str = Field(default="1.0.0", validation_alias="SERVICE_VERSION")

    # Modules
    # JSON object keyed by module name, e.g. {"location": {"force_unhealthy": true}}.
    # Values are handed to module factories untouched.
    module_options: dict[str, dict[str, Any]] = Field(
        default_factory=dict, validation_alias="MODULE_OPTIONS"
    )
    # Run the static import-boundary audit before wiring modules.
    enforce_module_boundaries: bool = Field(
        default=False, validation_alias="ENFORCE_MODULE_BOUNDARIES"
    )

    # Observability (OpenTelemetry)
    otel_enabled: bool = Field(default=False, validation_alias="OTEL_ENABLED")
    otel_service_name: str | None = Field(
        default="c2b-pre-inspection-service", validation_alias="OTEL_SERVICE_NAME"
    )
    # OTLP/HTTP endpoint (e.g. http://otel-collector:4318/v1/traces)
    otel_exporter_otlp_endpoint: str | None = Field(
        default=None, validation_alias="OTEL_EXPORTER_OTLP_ENDPOINT"
    )

    # ---- helpers / derived flags ----
    @property
    def normalized_environment(self) -> str:
        v = (self.environment or "").strip().lower()
        if v in ("prod", "production"):
            return "production"
        if v in ("stage", "staging"):
            return "staging"
        if v in ("dev", "development"):
            return "development"
        return v or "development"

    @property
    def is_production(self) -> bool:
        return self.normalized_environment == "production"

    @property
    def is_development(self) -> bool:
        return self.normalized_environment == "development"

    def options_for(self, module_name: str) -> dict[str, Any]:
        opts = (self.module_options or {}).get(module_name)
        return dict(opts) if isinstance(opts, dict) else {}

    def to_log_safe_dict(self) -> dict[str, object]:
        """
        A redacted representation safe for structured logs / diagnostics.
        """
        return {
            "environment": self.normalized_environment,
            "host": self.host,
            "port": self.port,
            "log_level": self.log_level,
            "service": {
                "name": self.service_name,
                "version": self.service_version,
            },
            "modules": {
                "configured": sorted((self.module_options or {}).keys()),
                "enforce_boundaries": bool(self.enforce_module_boundaries),
            },
            "otel": {
                "enabled": bool(self.otel_enabled),
                "endpoint_configured": bool(
                    self.otel_exporter_otlp_endpoint
                    and str(self.otel_exporter_otlp_endpoint).strip()
                ),
            },
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
