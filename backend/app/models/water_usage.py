from sqlalchemy import Column, DateTime, ForeignKey, Numeric, String, UniqueConstraint, func

from app.core.database import Base
from app.models.shared import UUIDType, generate_uuid


class WaterUsage(Base):
    """One meter reading per customer and usage month."""

    __tablename__ = "water_usages"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    tenant_id = Column(
        UUIDType, ForeignKey("tenants.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    customer_id = Column(
        UUIDType, ForeignKey("customers.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    usage_month = Column(String(7), nullable=False, index=True)  # YYYY-MM
    meter_start = Column(Numeric(12, 2), nullable=False, default=0)
    meter_end = Column(Numeric(12, 2), nullable=False)
    usage_m3 = Column(Numeric(12, 2), nullable=False)
    # Tariff price at recording time; informational, invoices re-price.
    amount_calculated = Column(Numeric(15, 2), nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint("customer_id", "usage_month", name="uq_water_usages_customer_month"),
    )
