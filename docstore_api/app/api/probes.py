"""
Health and metrics probes.

Both routes are mounted at the application root (``/health`` and
``/metrics``), outside the versioned API, and need no authentication.
``/metrics`` uses the Prometheus text exposition format.
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from docstore_api.app.core.config import Settings
from docstore_api.app.schemas.health import HealthResponse

router = APIRouter(tags=["health"])

METRICS_TEMPLATE = """\
# HELP docstore_api_info Information about the DocStore API
# TYPE docstore_api_info gauge
docstore_api_info{{version="{version}",environment="{environment}"}} 1
# HELP docstore_api_uptime_seconds Seconds since the application was created
# TYPE docstore_api_uptime_seconds counter
docstore_api_uptime_seconds {uptime}
# HELP docstore_api_documents Number of documents currently stored
# TYPE docstore_api_documents gauge
docstore_api_documents {documents}
# HELP docstore_api_health_status Health status of the API (1 = healthy, 0 = unhealthy)
# TYPE docstore_api_health_status gauge
docstore_api_health_status 1
"""


@router.get("/health", response_model=HealthResponse)
def health_check(request: Request) -> HealthResponse:
    """Liveness probe.  Returns 200 whenever the process is serving."""
    settings: Settings = request.app.state.settings
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc),
        service=settings.project_name,
        version=settings.api_version,
        environment=settings.environment,
    )


@router.get("/metrics", response_class=PlainTextResponse)
def metrics(request: Request) -> str:
    settings: Settings = request.app.state.settings
    uptime = int(time.monotonic() - request.app.state.started_at)
    return METRICS_TEMPLATE.format(
        version=settings.api_version,
        environment=settings.environment,
        uptime=uptime,
        documents=request.app.state.document_service.count_documents(),
    )
