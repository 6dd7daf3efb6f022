"""Pydantic request/response models for the notify API.

Field names follow the store app's camelCase JSON.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Models
# ---------------------------------------------------------------------------
class NewOrderRequest(BaseModel):
    orderId: str | int | None = Field(None, examples=["A1B2C3"])
    deliveryFee: float | str | None = None
    itemsTotal: float | str | None = None
    grandTotal: float | str | None = None


class StatusChangeRequest(BaseModel):
    orderId: str | int | None = Field(None, examples=["A1B2C3"])
    status: str | int | float | None = Field(None, examples=["shipped"])
    newStatus: str | int | float | None = Field(None, description="Alias of status sent by older app builds")


# ---------------------------------------------------------------------------
# Response Models
# ---------------------------------------------------------------------------
class RecipientCounts(BaseModel):
    admin: int = 0
    owner: int = 0
    customer: int = 0


class NotifyResponse(BaseModel):
    ok: bool = True
    counts: RecipientCounts


class HealthResponse(BaseModel):
    ok: bool = True
    message: str = "Push server is running"


class ErrorResponse(BaseModel):
    ok: bool = False
    error: str
