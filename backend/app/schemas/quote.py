import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class QuoteCreate(BaseModel):
    system_size: float = Field(gt=0)
    total_cost: float = Field(ge=0)
    monthly_usage: float | None = Field(default=None, gt=0)
    bill_reference: str | None = Field(default=None, max_length=100)
    panel_power: int | None = Field(default=None, gt=0)
    inverter_size: float | None = Field(default=None, gt=0)
    breakdown: dict[str, float] = Field(default_factory=dict)


class QuoteResponse(BaseModel):
    id: uuid.UUID
    bill_reference: str | None
    monthly_usage: float | None
    system_size: float
    total_cost: float
    panel_power: int | None
    inverter_size: float | None
    breakdown: dict[str, float]
    created_at: datetime

    model_config = {"from_attributes": True}
