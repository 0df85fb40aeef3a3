"""Payment API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.auth import get_current_tenant
from app.core.database import get_db
from app.models.payment import Payment
from app.repositories.payment_repository import PaymentRepository
from app.schemas.invoice import InvoiceResponse
from app.schemas.payment import PaymentApplicationResponse, PaymentCreate, PaymentResponse
from app.services.payment_ledger import PaymentLedgerService

router = APIRouter()


@router.post(
    "/",
    response_model=PaymentApplicationResponse,
    status_code=201,
    summary="Apply payment",
    responses={
        400: {"description": "Payment exceeds the remaining amount"},
        404: {"description": "Invoice not found"},
        409: {"description": "Invoice already paid"},
    },
)
async def apply_payment(
    data: PaymentCreate,
    db: Session = Depends(get_db),
    tenant_id: UUID = Depends(get_current_tenant),
) -> PaymentApplicationResponse:
    """Record a payment against an invoice and settle it when fully paid."""
    application = PaymentLedgerService(db).apply_payment(
        tenant_id, data.invoice_id, data.amount, reference=data.reference
    )
    return PaymentApplicationResponse(
        payment=PaymentResponse.model_validate(application.payment),
        invoice=InvoiceResponse.model_validate(application.invoice),
        customer_activated=application.customer_activated,
    )


@router.get(
    "/customer/{customer_id}",
    response_model=list[PaymentResponse],
    summary="Customer payment history",
)
async def customer_payment_history(
    customer_id: UUID,
    db: Session = Depends(get_db),
    tenant_id: UUID = Depends(get_current_tenant),
) -> list[Payment]:
    return PaymentRepository(db).get_by_customer_id(customer_id, tenant_id)
