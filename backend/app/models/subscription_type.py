from sqlalchemy import Column, DateTime, ForeignKey, Numeric, String, Text, func

from app.core.database import Base
from app.models.shared import UUIDType, generate_uuid


class SubscriptionType(Base):
    """Per-tenant customer plan.

    Holds the flat charges added on top of the volumetric charge, and the
    tariff category whose progressive tiers price the customer's usage.
    """

    __tablename__ = "subscription_types"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    tenant_id = Column(
        UUIDType, ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False, index=True
    )
    tariff_category_id = Column(
        UUIDType, ForeignKey("tariff_categories.id", ondelete="RESTRICT"), nullable=True
    )
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    registration_fee = Column(Numeric(15, 2), nullable=False, default=0)
    monthly_fee = Column(Numeric(15, 2), nullable=False, default=0)  # abonemen
    maintenance_fee = Column(Numeric(15, 2), nullable=False, default=0)
    late_fee_per_day = Column(Numeric(15, 2), nullable=False, default=0)
    max_late_fee = Column(Numeric(15, 2), nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
