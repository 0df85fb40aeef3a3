"""Payment repository for data access."""

from decimal import Decimal
from uuid import UUID

from sqlalchemy import func as sa_func
from sqlalchemy.orm import Session

from app.models.invoice import Invoice
from app.models.payment import Payment


class PaymentRepository:
    """Repository for the append-only Payment ledger."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_invoice_id(self, invoice_id: UUID, tenant_id: UUID) -> list[Payment]:
        """Get all payments recorded against an invoice, oldest first."""
        return (
            self.db.query(Payment)
            .filter(Payment.invoice_id == invoice_id, Payment.tenant_id == tenant_id)
            .order_by(Payment.paid_at.asc())
            .all()
        )

    def get_by_customer_id(self, customer_id: UUID, tenant_id: UUID) -> list[Payment]:
        """Get a customer's payment history, newest first."""
        return (
            self.db.query(Payment)
            .join(Invoice, Invoice.id == Payment.invoice_id)
            .filter(Invoice.customer_id == customer_id, Payment.tenant_id == tenant_id)
            .order_by(Payment.paid_at.desc())
            .all()
        )

    def add(
        self,
        tenant_id: UUID,
        invoice_id: UUID,
        amount: Decimal,
        reference: str | None = None,
    ) -> Payment:
        """Append a payment to the ledger in the current transaction."""
        payment = Payment(
            tenant_id=tenant_id,
            invoice_id=invoice_id,
            amount=amount,
            reference=reference,
        )
        self.db.add(payment)
        self.db.flush()
        return payment

    def get_total_paid(self, invoice_id: UUID) -> Decimal:
        """Sum every payment recorded for an invoice."""
        result = (
            self.db.query(sa_func.sum(Payment.amount))
            .filter(Payment.invoice_id == invoice_id)
            .scalar()
        )
        return Decimal(str(result)) if result else Decimal("0")
