"""Payment schemas."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.invoice import InvoiceResponse


class PaymentCreate(BaseModel):
    """Schema for applying a payment to an invoice."""

    invoice_id: UUID
    amount: Decimal = Field(..., gt=0, decimal_places=2)
    reference: str | None = Field(default=None, max_length=255)


class PaymentResponse(BaseModel):
    """Schema for payment response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    invoice_id: UUID
    amount: Decimal
    reference: str | None = None
    paid_at: datetime
    created_at: datetime


class PaymentApplicationResponse(BaseModel):
    """A recorded payment together with the invoice state it produced."""

    payment: PaymentResponse
    invoice: InvoiceResponse
    customer_activated: bool = False
