from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.auth import get_current_tenant
from app.core.database import get_db
from app.models.water_usage import WaterUsage
from app.repositories.water_usage_repository import WaterUsageRepository
from app.schemas.water_usage import WaterUsageCreate, WaterUsageResponse
from app.services.meter_reading_service import MeterReadingService

router = APIRouter()


@router.post(
    "/",
    response_model=WaterUsageResponse,
    status_code=201,
    summary="Record meter reading",
    responses={
        400: {"description": "Reading below the previous month or above the usage limit"},
        404: {"description": "Customer not found"},
        409: {"description": "Month already has a reading"},
    },
)
async def record_meter_reading(
    data: WaterUsageCreate,
    db: Session = Depends(get_db),
    tenant_id: UUID = Depends(get_current_tenant),
) -> WaterUsage:
    return MeterReadingService(db).record(
        tenant_id, data.customer_id, data.usage_month, data.meter_end
    )


@router.get("/", response_model=list[WaterUsageResponse], summary="List usage records")
async def list_water_usages(
    customer_id: UUID | None = None,
    usage_month: str | None = Query(default=None, pattern=r"^\d{4}-\d{2}$"),
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=1000),
    db: Session = Depends(get_db),
    tenant_id: UUID = Depends(get_current_tenant),
) -> list[WaterUsage]:
    return WaterUsageRepository(db).get_all(
        tenant_id, customer_id=customer_id, usage_month=usage_month, skip=skip, limit=limit
    )
