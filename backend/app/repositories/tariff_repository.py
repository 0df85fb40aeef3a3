"""Tariff category and progressive rate data access."""

from uuid import UUID

from sqlalchemy.orm import Session

from app.models.tariff_category import ProgressiveRate, TariffCategory
from app.schemas.tariff import ProgressiveRateCreate, TariffCategoryCreate


class TariffRepository:
    """Repository for TariffCategory and its ProgressiveRate tiers."""

    def __init__(self, db: Session):
        self.db = db

    def get_categories(self, tenant_id: UUID, active_only: bool = False) -> list[TariffCategory]:
        query = self.db.query(TariffCategory).filter(TariffCategory.tenant_id == tenant_id)
        if active_only:
            query = query.filter(TariffCategory.is_active.is_(True))
        return query.order_by(TariffCategory.display_order.asc(), TariffCategory.code.asc()).all()

    def get_category(self, category_id: UUID, tenant_id: UUID) -> TariffCategory | None:
        return (
            self.db.query(TariffCategory)
            .filter(TariffCategory.id == category_id, TariffCategory.tenant_id == tenant_id)
            .first()
        )

    def create_category(self, data: TariffCategoryCreate, tenant_id: UUID) -> TariffCategory:
        category = TariffCategory(
            tenant_id=tenant_id,
            code=data.code,
            name=data.name,
            tariff_type=data.tariff_type.value,
            description=data.description,
            display_order=data.display_order,
        )
        self.db.add(category)
        self.db.commit()
        self.db.refresh(category)
        return category

    def get_rates(
        self, tenant_id: UUID, category_id: UUID | None = None
    ) -> list[ProgressiveRate]:
        query = self.db.query(ProgressiveRate).filter(ProgressiveRate.tenant_id == tenant_id)
        if category_id is not None:
            query = query.filter(ProgressiveRate.category_id == category_id)
        return query.order_by(
            ProgressiveRate.display_order.asc(), ProgressiveRate.min_volume.asc()
        ).all()

    def get_active_rates(self, category_id: UUID, tenant_id: UUID) -> list[ProgressiveRate]:
        """Active tiers of a category, sorted ascending by ``min_volume``."""
        return (
            self.db.query(ProgressiveRate)
            .filter(
                ProgressiveRate.category_id == category_id,
                ProgressiveRate.tenant_id == tenant_id,
                ProgressiveRate.is_active.is_(True),
            )
            .order_by(ProgressiveRate.min_volume.asc())
            .all()
        )

    def create_rate(self, data: ProgressiveRateCreate, tenant_id: UUID) -> ProgressiveRate:
        rate = ProgressiveRate(
            tenant_id=tenant_id,
            category_id=data.category_id,
            min_volume=data.min_volume,
            max_volume=data.max_volume,
            price_per_unit=data.price_per_unit,
            display_order=data.display_order,
        )
        self.db.add(rate)
        self.db.commit()
        self.db.refresh(rate)
        return rate
