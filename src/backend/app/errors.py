"""Rack Estimator error hierarchy.

All errors raised by the estimation engine and the request boundary inherit
from EstimatorError. The global exception handler in main.py converts these
to structured JSON responses with the correct HTTP status code and a
request_id for traceability.
"""


class EstimatorError(Exception):
    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class MalformedInputError(EstimatorError):
    """The request body is not a recognizable batch of servers."""

    status_code = 400
    code = "MALFORMED_INPUT"


class InvalidInputError(EstimatorError):
    """One server record in the batch failed validation."""

    status_code = 400
    code = "INVALID_INPUT"
