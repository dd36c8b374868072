"""
Pydantic schemas for the trade API request/response contract.

The instruction body itself uses the CDM wire model from the
infrastructure layer, so the HTTP response is the same JSON the
instruction codec produces. No business logic belongs here.
"""

from pydantic import BaseModel, Field

from app.infrastructure.trade.cdm_schemas import QuantityChangeInstructionModel

URL_PATTERN = r"^https?://\S+$"
URL_MAX_LEN = 2048

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "MessageResponse",
    "QuantityChangeInstructionModel",
    "URL_MAX_LEN",
    "URL_PATTERN",
]


class ErrorResponse(BaseModel):
    """Standard error response body.

    Attributes:
        error: Short, client-safe error summary.
        kind: Failure category (parse, navigation, type_mismatch, ...).
        detail: Optional human-readable detail.
        path: Offending document path, when one applies.
    """

    error: str
    kind: str | None = None
    detail: str | None = None
    path: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Application status")
    version: str = Field(..., description="Application version")


class MessageResponse(BaseModel):
    """Plain message response used by the greeting endpoints."""

    message: str
