"""
Employee Directory Backend - Liveness and Health Routes
=======================================================

What:  `/` answers a fixed text line as soon as the process serves HTTP.
       `/health` additionally checks that the store answers SELECT 1.
Who:   Called by Docker health checks, load balancers and humans.

Status levels for /health:
    - healthy:   store reachable
    - unhealthy: store unreachable (still HTTP 200; the body carries the state)
"""

import time

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app import __version__
from app.dependencies import get_gateway
from app.schemas.employee import HealthResponse
from app.services.employee_gateway import EmployeeGateway

router = APIRouter(tags=["Health"])

LIVENESS_MESSAGE = "Employee API is running"

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Liveness message",
)
async def liveness() -> str:
    return LIVENESS_MESSAGE


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Reports whether the employee store is reachable.",
)
async def health_check(
    gateway: EmployeeGateway = Depends(get_gateway),
) -> HealthResponse:
    connected = await gateway.ping()
    return HealthResponse(
        status="healthy" if connected else "unhealthy",
        version=__version__,
        database="connected" if connected else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
