"""Telemetry resource: SDK defaults merged with the service identity."""

import logging
from typing import TYPE_CHECKING

from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource

from audit_otel.telemetry.exceptions import SetupError

if TYPE_CHECKING:
    from audit_otel.config.settings import AppSettings

logger = logging.getLogger(__name__)

# Semantic conventions version the service attributes follow.
SCHEMA_URL = "https://opentelemetry.io/schemas/1.25.0"


def merge_resources(base: Resource, override: Resource) -> Resource:
    """
    Merge override into base; override wins on key collision.
    Two different non-empty schema URLs are a conflict and raise SetupError
    (the SDK would only log it and keep base).
    """
    if base.schema_url and override.schema_url and base.schema_url != override.schema_url:
        raise SetupError(
            f"conflicting resource schema URLs: {base.schema_url} != {override.schema_url}"
        )
    return base.merge(override)


def build_resource(settings: "AppSettings") -> Resource:
    """Resource attached to every emitted record. Reads OTEL_* environment via the SDK defaults."""
    service = Resource(
        {
            SERVICE_NAME: settings.service_name,
            SERVICE_VERSION: settings.service_version,
        },
        schema_url=SCHEMA_URL,
    )
    resource = merge_resources(Resource.create(), service)
    logger.debug("telemetry resource built: %s", dict(resource.attributes))
    return resource
