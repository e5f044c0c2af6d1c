"""
Health Router - Readiness of the sidecar executable
"""

import os

from fastapi import APIRouter, Depends

from api.dependencies import get_runner
from api.schemas.health import ReadinessStatus
from sidecar_encoder.sidecar_runner import SidecarRunner

router = APIRouter()


@router.get("/ready", response_model=ReadinessStatus)
async def health_check_ready(runner: SidecarRunner = Depends(get_runner)) -> ReadinessStatus:
    """
    Readiness probe.

    Returns ready=True when the sidecar exists and is executable. The
    sidecar itself is never run here.
    """
    return ReadinessStatus(
        ready=runner.is_available(),
        sidecar_path=str(runner.path),
        details={
            "exists": runner.path.exists(),
            "executable": os.access(runner.path, os.X_OK),
            "timeout_seconds": runner.timeout,
            "max_concurrency": runner.max_concurrency,
        }
    )
