from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field


class MonthlyInvoiceGenerateRequest(BaseModel):
    usage_month: str = Field(..., pattern=r"^\d{4}-\d{2}$", examples=["2025-06"])


class MonthlyInvoiceGenerateResponse(BaseModel):
    usage_month: str
    created: int
    skipped: int
    failed: int


class InvoiceResponse(BaseModel):
    id: UUID
    customer_id: UUID
    invoice_type: str
    usage_month: str
    usage_m3: Decimal
    usage_amount: Decimal
    abonemen: Decimal
    maintenance_fee: Decimal
    late_fee: Decimal
    price_per_m3: Decimal
    total_amount: Decimal
    total_paid: Decimal
    is_paid: bool
    due_date: date | None = None
    paid_at: datetime | None = None
    created_at: datetime

    model_config = {"from_attributes": True}
