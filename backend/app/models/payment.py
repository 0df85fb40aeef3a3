"""Payment model - append-only ledger of amounts paid against invoices."""

from sqlalchemy import Column, DateTime, ForeignKey, Numeric, String, func

from app.core.database import Base
from app.models.shared import UUIDType, generate_uuid, utc_now


class Payment(Base):
    __tablename__ = "payments"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    tenant_id = Column(
        UUIDType, ForeignKey("tenants.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    invoice_id = Column(
        UUIDType, ForeignKey("invoices.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    amount = Column(Numeric(15, 2), nullable=False)
    reference = Column(String(255), nullable=True)

    paid_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
