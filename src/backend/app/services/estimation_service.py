"""Estimation service: stateless, no I/O.

Per-server time:
  estimated_time = base_time * manufacturer_factor * complexity_multiplier * quantity

Unknown manufacturers use a factor of 1.0. The batch total is classified as:
  total > 20       → High
  10 < total ≤ 20  → Medium
  total ≤ 10       → Low

A single invalid record fails the whole batch; no partial breakdown is
returned.
"""

import logging
import math
from collections.abc import Sequence
from types import MappingProxyType
from typing import Any

from app.errors import InvalidInputError
from app.schemas.estimate import Complexity, EstimationResult, ServerEstimate

log = logging.getLogger(__name__)

# server type → (base_time_hours, complexity_multiplier)
_TYPE_FACTORS: MappingProxyType[str, tuple[float, float]] = MappingProxyType(
    {
        "rack": (2, 1.2),
        "blade": (3, 1.5),
        "custom": (4, 2),
    }
)

_MANUFACTURER_FACTORS: MappingProxyType[str, float] = MappingProxyType(
    {
        "Dell": 0.9,
        "HP": 1.0,
        "Lenovo": 1.1,
        "SuperMicro": 1.2,
    }
)

_DEFAULT_MANUFACTURER_FACTOR = 1.0

_REQUIRED_FIELDS = ("type", "manufacturer", "model", "quantity")

_HIGH_THRESHOLD = 20
_MEDIUM_THRESHOLD = 10


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_missing(value: Any) -> bool:
    """Permissive presence check: null, false, "", 0 and NaN all count as missing."""
    if value is None or value is False or value == "":
        return True
    if _is_number(value):
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    return False


def _is_finite(value: int | float) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        # int beyond float range
        return False


def validate_server(server: Any) -> None:
    """Raise InvalidInputError if *server* is not a usable server record."""
    if not isinstance(server, dict):
        raise InvalidInputError("Invalid server object")

    for field in _REQUIRED_FIELDS:
        if _is_missing(server.get(field)):
            raise InvalidInputError(f"Missing required field: {field}")

    server_type = server["type"]
    if not isinstance(server_type, str) or server_type not in _TYPE_FACTORS:
        raise InvalidInputError("Invalid server type")

    quantity = server["quantity"]
    if not _is_number(quantity) or quantity <= 0:
        raise InvalidInputError("Quantity must be a positive number")
    if not _is_finite(quantity):
        raise InvalidInputError("Quantity is too large to estimate")


def _manufacturer_factor(manufacturer: Any) -> float:
    if not isinstance(manufacturer, str):
        return _DEFAULT_MANUFACTURER_FACTOR
    return _MANUFACTURER_FACTORS.get(manufacturer, _DEFAULT_MANUFACTURER_FACTOR)


def classify_complexity(total_time: float) -> Complexity:
    if total_time > _HIGH_THRESHOLD:
        return "High"
    if total_time > _MEDIUM_THRESHOLD:
        return "Medium"
    return "Low"


def estimate_servers(servers: Sequence[Any]) -> EstimationResult:
    """Validate every record and compute the per-server and total estimate.

    Raises InvalidInputError on the first invalid record.
    """
    total_time = 0.0
    breakdown: list[ServerEstimate] = []

    for server in servers:
        validate_server(server)

        base_time, complexity_multiplier = _TYPE_FACTORS[server["type"]]
        manufacturer_factor = _manufacturer_factor(server["manufacturer"])
        quantity = server["quantity"]

        estimated_time = base_time * manufacturer_factor * complexity_multiplier * quantity
        total_time += estimated_time
        if not math.isfinite(total_time):
            raise InvalidInputError("Quantity is too large to estimate")

        breakdown.append(
            ServerEstimate(
                type=server["type"],
                manufacturer=server["manufacturer"],
                model=server["model"],
                quantity=quantity,
                estimated_time=estimated_time,
            )
        )

    complexity = classify_complexity(total_time)
    log.debug(
        "Estimated %d server entries: total=%.4fh complexity=%s",
        len(breakdown),
        total_time,
        complexity,
    )
    return EstimationResult(
        total_time=total_time,
        breakdown_by_server=breakdown,
        complexity=complexity,
    )
