from decimal import Decimal
from uuid import UUID

from sqlalchemy.orm import Session

from app.models.water_usage import WaterUsage


class WaterUsageRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_all(
        self,
        tenant_id: UUID,
        customer_id: UUID | None = None,
        usage_month: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[WaterUsage]:
        query = self.db.query(WaterUsage).filter(WaterUsage.tenant_id == tenant_id)
        if customer_id:
            query = query.filter(WaterUsage.customer_id == customer_id)
        if usage_month:
            query = query.filter(WaterUsage.usage_month == usage_month)
        return query.order_by(WaterUsage.created_at.desc()).offset(skip).limit(limit).all()

    def get_for_month(
        self, customer_id: UUID, usage_month: str, tenant_id: UUID
    ) -> WaterUsage | None:
        return (
            self.db.query(WaterUsage)
            .filter(
                WaterUsage.customer_id == customer_id,
                WaterUsage.usage_month == usage_month,
                WaterUsage.tenant_id == tenant_id,
            )
            .first()
        )

    def get_by_month(self, tenant_id: UUID, usage_month: str) -> list[WaterUsage]:
        return (
            self.db.query(WaterUsage)
            .filter(WaterUsage.tenant_id == tenant_id, WaterUsage.usage_month == usage_month)
            .order_by(WaterUsage.created_at.asc())
            .all()
        )

    def add(
        self,
        tenant_id: UUID,
        customer_id: UUID,
        usage_month: str,
        meter_start: Decimal,
        meter_end: Decimal,
        amount_calculated: Decimal,
    ) -> WaterUsage:
        usage = WaterUsage(
            tenant_id=tenant_id,
            customer_id=customer_id,
            usage_month=usage_month,
            meter_start=meter_start,
            meter_end=meter_end,
            usage_m3=meter_end - meter_start,
            amount_calculated=amount_calculated,
        )
        self.db.add(usage)
        self.db.flush()
        return usage
