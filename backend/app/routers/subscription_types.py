from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.auth import get_current_tenant
from app.core.database import get_db
from app.models.subscription_type import SubscriptionType
from app.repositories.subscription_type_repository import SubscriptionTypeRepository
from app.repositories.tariff_repository import TariffRepository
from app.schemas.subscription_type import SubscriptionTypeCreate, SubscriptionTypeResponse

router = APIRouter()


@router.post(
    "/",
    response_model=SubscriptionTypeResponse,
    status_code=201,
    summary="Create subscription type",
    responses={400: {"description": "Unknown tariff category"}},
)
async def create_subscription_type(
    data: SubscriptionTypeCreate,
    db: Session = Depends(get_db),
    tenant_id: UUID = Depends(get_current_tenant),
) -> SubscriptionType:
    if data.tariff_category_id and not TariffRepository(db).get_category(
        data.tariff_category_id, tenant_id
    ):
        raise HTTPException(status_code=400, detail="Tariff category not found")
    return SubscriptionTypeRepository(db).create(data, tenant_id)


@router.get("/", response_model=list[SubscriptionTypeResponse], summary="List subscription types")
async def list_subscription_types(
    db: Session = Depends(get_db),
    tenant_id: UUID = Depends(get_current_tenant),
) -> list[SubscriptionType]:
    return SubscriptionTypeRepository(db).get_all(tenant_id)
