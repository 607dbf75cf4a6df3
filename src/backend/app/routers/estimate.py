"""Server racking estimate endpoint.

POST /api/v1/estimate : estimate time and complexity for a batch of servers (no auth required)
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Request

from app.errors import InvalidInputError, MalformedInputError
from app.middleware import get_request_id
from app.schemas.estimate import EstimationResult
from app.services.estimation_service import estimate_servers

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["estimate"])


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unsupported JSON constant: {name}")


def _decode_batch(body: bytes) -> list[Any]:
    """Decode the request body and check it is a JSON array."""
    try:
        servers = json.loads(body, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise MalformedInputError("Invalid JSON body") from exc

    if not isinstance(servers, list):
        raise MalformedInputError("Input must be an array of servers")
    return servers


@router.post("/estimate", response_model=EstimationResult)
async def estimate(request: Request) -> EstimationResult:
    servers = _decode_batch(await request.body())
    try:
        return estimate_servers(servers)
    except InvalidInputError as exc:
        log.warning(
            "Rejected batch of %d server entries: %s (request_id=%s)",
            len(servers),
            exc.message,
            get_request_id(),
        )
        raise
