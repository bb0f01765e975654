# audit_otel/config/settings.py

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from audit_otel.telemetry.exporters import ExporterKind


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="AUDIT_OTEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Resource ---
    service_name: str = Field("test-service", min_length=1)
    service_version: str = "0.1.0"

    # --- Input ---
    audit_log_path: Path = Path("audit.log")

    # --- Exporter ---
    exporter: ExporterKind = ExporterKind.CONSOLE
    otlp_endpoint: Optional[str] = None
    console_indent: Optional[int] = Field(4, ge=0)

    # --- Batch processor ---
    max_queue_size: int = Field(4, ge=1)
    max_export_batch_size: int = Field(1, ge=1)
    schedule_delay_millis: float = Field(1000, gt=0)
    export_timeout_millis: float = Field(30000, gt=0)
    shutdown_timeout_millis: Optional[int] = Field(None, gt=0)

    # --- Emitted record ---
    logger_name: str = "test"
    message: str = "Hello World!"

    # --- Observability ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @model_validator(mode="after")
    def batch_must_fit_queue(self) -> "AppSettings":
        """The processor rejects a batch size larger than its queue."""
        if self.max_export_batch_size > self.max_queue_size:
            raise ValueError(
                "max_export_batch_size must be less than or equal to max_queue_size"
            )
        return self


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
