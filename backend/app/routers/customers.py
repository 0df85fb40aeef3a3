from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.core.auth import get_current_tenant
from app.core.database import get_db
from app.models.customer import Customer
from app.repositories.customer_repository import CustomerRepository
from app.schemas.customer import CustomerCreate, CustomerRegistrationResponse, CustomerResponse
from app.schemas.invoice import InvoiceResponse
from app.services.customer_registration import CustomerRegistrationService

router = APIRouter()


@router.post(
    "/",
    response_model=CustomerRegistrationResponse,
    status_code=201,
    summary="Register customer",
    responses={
        404: {"description": "Subscription type not found"},
        409: {"description": "Meter number already registered"},
    },
)
async def register_customer(
    data: CustomerCreate,
    db: Session = Depends(get_db),
    tenant_id: UUID = Depends(get_current_tenant),
) -> CustomerRegistrationResponse:
    """Register an inactive customer and issue its registration invoice."""
    customer, invoice = CustomerRegistrationService(db).register(tenant_id, data)
    return CustomerRegistrationResponse(
        customer=CustomerResponse.model_validate(customer),
        registration_invoice=InvoiceResponse.model_validate(invoice),
    )


@router.get("/", response_model=list[CustomerResponse], summary="List customers")
async def list_customers(
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=1000),
    db: Session = Depends(get_db),
    tenant_id: UUID = Depends(get_current_tenant),
) -> list[Customer]:
    return CustomerRepository(db).get_all(tenant_id, skip=skip, limit=limit)


@router.get(
    "/{customer_id}",
    response_model=CustomerResponse,
    summary="Get customer",
    responses={404: {"description": "Customer not found"}},
)
async def get_customer(
    customer_id: UUID,
    db: Session = Depends(get_db),
    tenant_id: UUID = Depends(get_current_tenant),
) -> Customer:
    customer = CustomerRepository(db).get_by_id(customer_id, tenant_id)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer
