from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from app.schemas.invoice import InvoiceResponse


class CustomerCreate(BaseModel):
    subscription_type_id: UUID
    meter_number: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=50)
    address: str | None = Field(default=None, max_length=500)


class CustomerResponse(BaseModel):
    id: UUID
    subscription_type_id: UUID
    meter_number: str
    name: str
    email: str | None
    phone: str | None
    address: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class CustomerRegistrationResponse(BaseModel):
    customer: CustomerResponse
    registration_invoice: InvoiceResponse
