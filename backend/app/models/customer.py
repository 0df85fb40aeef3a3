from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, UniqueConstraint, func

from app.core.database import Base
from app.models.shared import UUIDType, generate_uuid


class Customer(Base):
    __tablename__ = "customers"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    tenant_id = Column(
        UUIDType, ForeignKey("tenants.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    subscription_type_id = Column(
        UUIDType, ForeignKey("subscription_types.id", ondelete="RESTRICT"), nullable=False
    )
    meter_number = Column(String(50), nullable=False)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    address = Column(String(500), nullable=True)
    # Set only when the registration invoice is fully paid.
    is_active = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        UniqueConstraint("tenant_id", "meter_number", name="uq_customers_tenant_meter_number"),
    )
