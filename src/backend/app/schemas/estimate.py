"""Pydantic schemas for the estimation domain.

Attributes are snake_case; the JSON wire format uses camelCase aliases.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

Complexity = Literal["Low", "Medium", "High"]


class ServerEstimate(BaseModel):
    """One input record echoed back with its computed time."""

    model_config = ConfigDict(populate_by_name=True)

    type: str
    # Echoed exactly as submitted; only validated as present.
    manufacturer: Any
    model: Any
    quantity: int | float
    estimated_time: float = Field(alias="estimatedTime")


class EstimationResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_time: float = Field(alias="totalTime")
    breakdown_by_server: list[ServerEstimate] = Field(alias="breakdownByServer")
    complexity: Complexity
