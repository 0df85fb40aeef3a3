from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from app.models.tariff_category import TariffType


class TariffCategoryCreate(BaseModel):
    code: str = Field(..., min_length=1, max_length=20)
    name: str = Field(..., min_length=1, max_length=100)
    tariff_type: TariffType = TariffType.RESIDENTIAL
    description: str | None = None
    display_order: int = 0


class TariffCategoryResponse(BaseModel):
    id: UUID
    code: str
    name: str
    tariff_type: str
    description: str | None
    is_active: bool
    display_order: int
    created_at: datetime

    model_config = {"from_attributes": True}


class ProgressiveRateCreate(BaseModel):
    category_id: UUID
    min_volume: Decimal = Field(..., ge=0)
    max_volume: Decimal | None = None
    price_per_unit: Decimal = Field(..., gt=0)
    display_order: int = 0

    @model_validator(mode="after")
    def check_bounds(self) -> "ProgressiveRateCreate":
        if self.max_volume is not None and self.max_volume <= self.min_volume:
            raise ValueError("max_volume must be greater than min_volume")
        return self


class ProgressiveRateResponse(BaseModel):
    id: UUID
    category_id: UUID
    min_volume: Decimal
    max_volume: Decimal | None
    price_per_unit: Decimal
    is_active: bool
    display_order: int

    model_config = {"from_attributes": True}


class BillSimulationRequest(BaseModel):
    category_id: UUID
    usage_volume: Decimal = Field(..., ge=0)


class TierCharge(BaseModel):
    tier_range: str
    volume: Decimal
    price_per_unit: Decimal
    amount: Decimal


class BillSimulationResponse(BaseModel):
    category: TariffCategoryResponse
    usage_volume: Decimal
    total_amount: Decimal
    breakdown: list[TierCharge]
