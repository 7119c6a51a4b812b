"""
CodeBoard Backend: Health Check Route
======================================

What:  Liveness/readiness probe for Docker and load balancers.
How:   The service has no external dependencies; it is healthy as long as
       the detection rule table is loaded and can classify a probe snippet.
"""

import logging
import time

from fastapi import APIRouter

from codeboard import __version__
from codeboard.classifier import DEFAULT_RULE_TABLE, classify
from codeboard.schemas.language import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()

_PROBE = "def probe():\n    print('ok')"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    status = "healthy"
    if len(DEFAULT_RULE_TABLE) == 0 or classify(_PROBE) != "python":
        status = "unhealthy"
        logger.warning("Health check: classifier probe failed")

    return HealthResponse(
        status=status,
        version=__version__,
        languages=len(DEFAULT_RULE_TABLE),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
