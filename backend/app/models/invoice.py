from enum import Enum

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Numeric,
    String,
    UniqueConstraint,
    func,
)

from app.core.database import Base
from app.models.shared import UUIDType, generate_uuid

REGISTRATION_USAGE_MONTH = "-"


class InvoiceType(str, Enum):
    REGISTRATION = "registration"
    MONTHLY = "monthly"


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    tenant_id = Column(
        UUIDType, ForeignKey("tenants.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    customer_id = Column(
        UUIDType, ForeignKey("customers.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    invoice_type = Column(String(20), nullable=False, default=InvoiceType.MONTHLY.value)
    usage_month = Column(String(7), nullable=False, index=True)

    usage_m3 = Column(Numeric(12, 2), nullable=False, default=0)
    usage_amount = Column(Numeric(15, 2), nullable=False, default=0)
    abonemen = Column(Numeric(15, 2), nullable=False, default=0)
    maintenance_fee = Column(Numeric(15, 2), nullable=False, default=0)
    late_fee = Column(Numeric(15, 2), nullable=False, default=0)
    price_per_m3 = Column(Numeric(15, 2), nullable=False, default=0)  # average, informational
    total_amount = Column(Numeric(15, 2), nullable=False)

    # Mutated only by the payment ledger.
    total_paid = Column(Numeric(15, 2), nullable=False, default=0)
    is_paid = Column(Boolean, nullable=False, default=False)

    due_date = Column(Date, nullable=True)
    paid_at = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        UniqueConstraint(
            "customer_id", "usage_month", "invoice_type", name="uq_invoices_customer_month_type"
        ),
    )
