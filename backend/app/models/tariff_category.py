from enum import Enum

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Numeric, String, Text, func

from app.core.database import Base
from app.models.shared import UUIDType, generate_uuid


class TariffType(str, Enum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"
    SOCIAL = "social"
    GOVERNMENT = "government"


class TariffCategory(Base):
    __tablename__ = "tariff_categories"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    tenant_id = Column(
        UUIDType, ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False, index=True
    )
    code = Column(String(20), nullable=False)
    name = Column(String(100), nullable=False)
    tariff_type = Column(String(50), nullable=False, default=TariffType.RESIDENTIAL.value)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    display_order = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class ProgressiveRate(Base):
    """One volume tier of a tariff category.

    ``max_volume`` is NULL for the unbounded top tier.
    """

    __tablename__ = "progressive_rates"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    tenant_id = Column(
        UUIDType, ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False, index=True
    )
    category_id = Column(
        UUIDType,
        ForeignKey("tariff_categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    min_volume = Column(Numeric(12, 2), nullable=False)
    max_volume = Column(Numeric(12, 2), nullable=True)
    price_per_unit = Column(Numeric(15, 2), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    display_order = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
