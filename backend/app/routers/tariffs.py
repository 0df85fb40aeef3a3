from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.auth import get_current_tenant
from app.core.database import get_db
from app.models.tariff_category import ProgressiveRate, TariffCategory
from app.repositories.tariff_repository import TariffRepository
from app.schemas.tariff import (
    BillSimulationRequest,
    BillSimulationResponse,
    ProgressiveRateCreate,
    ProgressiveRateResponse,
    TariffCategoryCreate,
    TariffCategoryResponse,
    TierCharge,
)
from app.services.tariff_service import TariffService

router = APIRouter()


@router.post(
    "/categories",
    response_model=TariffCategoryResponse,
    status_code=201,
    summary="Create tariff category",
)
async def create_category(
    data: TariffCategoryCreate,
    db: Session = Depends(get_db),
    tenant_id: UUID = Depends(get_current_tenant),
) -> TariffCategory:
    return TariffRepository(db).create_category(data, tenant_id)


@router.get(
    "/categories", response_model=list[TariffCategoryResponse], summary="List tariff categories"
)
async def list_categories(
    active_only: bool = False,
    db: Session = Depends(get_db),
    tenant_id: UUID = Depends(get_current_tenant),
) -> list[TariffCategory]:
    return TariffRepository(db).get_categories(tenant_id, active_only=active_only)


@router.post(
    "/progressive_rates",
    response_model=ProgressiveRateResponse,
    status_code=201,
    summary="Add progressive rate tier",
    responses={
        400: {"description": "Tier would break the contiguous schedule"},
        404: {"description": "Tariff category not found"},
    },
)
async def create_progressive_rate(
    data: ProgressiveRateCreate,
    db: Session = Depends(get_db),
    tenant_id: UUID = Depends(get_current_tenant),
) -> ProgressiveRate:
    return TariffService(db).add_rate(tenant_id, data)


@router.get(
    "/progressive_rates",
    response_model=list[ProgressiveRateResponse],
    summary="List progressive rate tiers",
)
async def list_progressive_rates(
    category_id: UUID | None = None,
    db: Session = Depends(get_db),
    tenant_id: UUID = Depends(get_current_tenant),
) -> list[ProgressiveRate]:
    return TariffRepository(db).get_rates(tenant_id, category_id=category_id)


@router.post(
    "/simulate",
    response_model=BillSimulationResponse,
    summary="Simulate bill",
    responses={
        400: {"description": "No active progressive rates for the category"},
        404: {"description": "Tariff category not found"},
    },
)
async def simulate_bill(
    data: BillSimulationRequest,
    db: Session = Depends(get_db),
    tenant_id: UUID = Depends(get_current_tenant),
) -> BillSimulationResponse:
    """Price a usage volume against a category's tiers without billing anyone."""
    category, quote = TariffService(db).simulate_bill(
        tenant_id, data.category_id, data.usage_volume
    )
    return BillSimulationResponse(
        category=TariffCategoryResponse.model_validate(category),
        usage_volume=quote.volume,
        total_amount=quote.total_amount,
        breakdown=[
            TierCharge(
                tier_range=charge.tier_range,
                volume=charge.volume,
                price_per_unit=charge.price_per_unit,
                amount=charge.amount,
            )
            for charge in quote.breakdown
        ],
    )
