"""
Log pipeline: exporter behind a batch processor, owned by one LoggerProvider.

The pipeline is built explicitly and handed to its single consumer; nothing is
registered as the global logger provider. Records are emitted on OpenTelemetry
loggers obtained from the pipeline's provider.
"""

import logging
from typing import TYPE_CHECKING, Optional

from opentelemetry._logs import Logger
from opentelemetry.sdk._logs import LoggerProvider
from opentelemetry.sdk._logs.export import BatchLogRecordProcessor, LogRecordExporter
from opentelemetry.sdk.resources import Resource

from audit_otel.telemetry.exceptions import SetupError, ShutdownError
from audit_otel.telemetry.exporters import build_exporter

if TYPE_CHECKING:
    from audit_otel.config.settings import AppSettings

logger = logging.getLogger(__name__)


class LogPipeline:
    """
    Owns the provider, processor and exporter and releases them on shutdown.
    shutdown() runs at most once; later calls are no-ops.
    """

    def __init__(
        self,
        provider: LoggerProvider,
        processor: BatchLogRecordProcessor,
        exporter: LogRecordExporter,
        *,
        shutdown_timeout_millis: Optional[int] = None,
    ) -> None:
        self._provider = provider
        self._processor = processor
        self._exporter = exporter
        self._shutdown_timeout_millis = shutdown_timeout_millis
        self._shut_down = False
        self.shutdown_error: Optional[ShutdownError] = None

    @property
    def provider(self) -> LoggerProvider:
        return self._provider

    @property
    def exporter(self) -> LogRecordExporter:
        return self._exporter

    @property
    def is_shut_down(self) -> bool:
        return self._shut_down

    def get_logger(self, name: str) -> Logger:
        """Logger whose records go to this pipeline only. The name becomes the instrumentation scope."""
        if self._shut_down:
            raise SetupError("log pipeline is shut down")
        return self._provider.get_logger(name)

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        return self._provider.force_flush(timeout_millis)

    def shutdown(self, timeout_millis: Optional[int] = None) -> None:
        """
        Drain the queue and release the exporter. With timeout_millis, a flush that
        does not finish in time raises ShutdownError (after the provider is shut down).
        """
        if self._shut_down:
            return
        self._shut_down = True
        if timeout_millis is None:
            timeout_millis = self._shutdown_timeout_millis

        flushed = True
        try:
            if timeout_millis is not None:
                flushed = self._provider.force_flush(timeout_millis)
            self._provider.shutdown()
        except Exception as e:
            raise ShutdownError(f"log pipeline shutdown failed: {e}") from e
        if not flushed:
            raise ShutdownError(f"log records not flushed within {timeout_millis} ms")
        logger.debug("log pipeline shut down")

    def __enter__(self) -> "LogPipeline":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        # A shutdown failure is reported, never raised over the run's own outcome.
        try:
            self.shutdown()
        except ShutdownError as e:
            self.shutdown_error = e
            logger.error("log pipeline shutdown failed: %s", e.message)
        return False


def build_pipeline(
    resource: Resource,
    settings: "AppSettings",
    exporter: Optional[LogRecordExporter] = None,
) -> LogPipeline:
    """
    Wire exporter -> BatchLogRecordProcessor -> LoggerProvider(resource).
    Uses the exporter selected by settings unless one is passed in. Raises SetupError.
    """
    if exporter is None:
        exporter = build_exporter(settings)

    try:
        processor = BatchLogRecordProcessor(
            exporter,
            schedule_delay_millis=settings.schedule_delay_millis,
            max_export_batch_size=settings.max_export_batch_size,
            export_timeout_millis=settings.export_timeout_millis,
            max_queue_size=settings.max_queue_size,
        )
    except ValueError as e:
        exporter.shutdown()
        raise SetupError(f"invalid batch processor configuration: {e}") from e

    # The pipeline owns shutdown; no atexit hook from the SDK.
    provider = LoggerProvider(resource=resource, shutdown_on_exit=False)
    provider.add_log_record_processor(processor)
    logger.debug(
        "log pipeline built (exporter=%s, max_queue_size=%d, max_export_batch_size=%d)",
        type(exporter).__name__,
        settings.max_queue_size,
        settings.max_export_batch_size,
    )
    return LogPipeline(
        provider,
        processor,
        exporter,
        shutdown_timeout_millis=settings.shutdown_timeout_millis,
    )
