from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from app.core.auth import get_current_tenant
from app.core.database import get_db
from app.models.invoice import Invoice, InvoiceType
from app.models.payment import Payment
from app.repositories.invoice_repository import InvoiceRepository
from app.schemas.invoice import (
    InvoiceResponse,
    MonthlyInvoiceGenerateRequest,
    MonthlyInvoiceGenerateResponse,
)
from app.schemas.payment import PaymentResponse
from app.services.invoice_generation import InvoiceGenerationService
from app.services.payment_ledger import PaymentLedgerService

router = APIRouter()


@router.post(
    "/generate",
    response_model=MonthlyInvoiceGenerateResponse,
    summary="Generate monthly invoices",
    responses={422: {"description": "Invalid usage month"}},
)
async def generate_monthly_invoices(
    data: MonthlyInvoiceGenerateRequest,
    db: Session = Depends(get_db),
    tenant_id: UUID = Depends(get_current_tenant),
) -> MonthlyInvoiceGenerateResponse:
    """Invoice every usage record of the month that is not invoiced yet."""
    result = InvoiceGenerationService(db).generate_monthly(tenant_id, data.usage_month)
    return MonthlyInvoiceGenerateResponse(
        usage_month=result.usage_month,
        created=result.created,
        skipped=result.skipped,
        failed=result.failed,
    )


@router.get("/", response_model=list[InvoiceResponse], summary="List invoices")
async def list_invoices(
    response: Response,
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=1000),
    customer_id: UUID | None = None,
    usage_month: str | None = None,
    invoice_type: InvoiceType | None = None,
    is_paid: bool | None = None,
    db: Session = Depends(get_db),
    tenant_id: UUID = Depends(get_current_tenant),
) -> list[Invoice]:
    repo = InvoiceRepository(db)
    response.headers["X-Total-Count"] = str(repo.count(tenant_id))
    return repo.get_all(
        tenant_id,
        skip=skip,
        limit=limit,
        customer_id=customer_id,
        usage_month=usage_month,
        invoice_type=invoice_type,
        is_paid=is_paid,
    )


@router.get(
    "/{invoice_id}",
    response_model=InvoiceResponse,
    summary="Get invoice",
    responses={404: {"description": "Invoice not found"}},
)
async def get_invoice(
    invoice_id: UUID,
    db: Session = Depends(get_db),
    tenant_id: UUID = Depends(get_current_tenant),
) -> Invoice:
    invoice = InvoiceRepository(db).get_by_id(invoice_id, tenant_id)
    if not invoice:
        raise HTTPException(status_code=404, detail="Invoice not found")
    return invoice


@router.get(
    "/{invoice_id}/payments",
    response_model=list[PaymentResponse],
    summary="List invoice payments",
    responses={404: {"description": "Invoice not found"}},
)
async def list_invoice_payments(
    invoice_id: UUID,
    db: Session = Depends(get_db),
    tenant_id: UUID = Depends(get_current_tenant),
) -> list[Payment]:
    return PaymentLedgerService(db).get_payments(tenant_id, invoice_id)
