from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field


class SubscriptionTypeCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    tariff_category_id: UUID | None = None
    registration_fee: Decimal = Field(default=Decimal("0"), ge=0)
    monthly_fee: Decimal = Field(default=Decimal("0"), ge=0)
    maintenance_fee: Decimal = Field(default=Decimal("0"), ge=0)
    late_fee_per_day: Decimal = Field(default=Decimal("0"), ge=0)
    max_late_fee: Decimal = Field(default=Decimal("0"), ge=0)


class SubscriptionTypeResponse(BaseModel):
    id: UUID
    name: str
    description: str | None
    tariff_category_id: UUID | None
    registration_fee: Decimal
    monthly_fee: Decimal
    maintenance_fee: Decimal
    late_fee_per_day: Decimal
    max_late_fee: Decimal
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
