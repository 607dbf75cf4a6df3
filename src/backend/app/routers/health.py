"""Health check endpoint for the Rack Estimator.

Unauthenticated and mounted at root (no /api/v1 prefix). Used as a liveness
probe.
"""

import importlib.metadata

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe: returns 200 if the application process is running."""
    version = importlib.metadata.version("rack-estimator")
    return {"status": "ok", "version": version}
