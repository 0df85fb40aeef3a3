from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field


class WaterUsageCreate(BaseModel):
    customer_id: UUID
    usage_month: str = Field(..., pattern=r"^\d{4}-\d{2}$", examples=["2025-06"])
    meter_end: Decimal = Field(..., ge=0, decimal_places=2)


class WaterUsageResponse(BaseModel):
    id: UUID
    customer_id: UUID
    usage_month: str
    meter_start: Decimal
    meter_end: Decimal
    usage_m3: Decimal
    amount_calculated: Decimal
    created_at: datetime

    model_config = {"from_attributes": True}
