"""Applies payments to invoices and settles them from the payment ledger."""

import logging
from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from sqlalchemy.orm import Session

from app.core.database import transaction
from app.core.errors import AlreadyPaid, InvoiceNotFound, OverpaymentRejected, ValidationError
from app.models.invoice import Invoice, InvoiceType
from app.models.payment import Payment
from app.models.shared import utc_now
from app.repositories.customer_repository import CustomerRepository
from app.repositories.invoice_repository import InvoiceRepository
from app.repositories.payment_repository import PaymentRepository
from app.services.tariff_engine import has_sub_cent_digits

logger = logging.getLogger(__name__)


@dataclass
class PaymentApplication:
    """A recorded payment and the invoice state it left behind."""

    payment: Payment
    invoice: Invoice
    customer_activated: bool = False


class PaymentLedgerService:
    """Service for applying payments against invoices."""

    def __init__(self, db: Session):
        self.db = db
        self.invoice_repo = InvoiceRepository(db)
        self.payment_repo = PaymentRepository(db)
        self.customer_repo = CustomerRepository(db)

    def apply_payment(
        self,
        tenant_id: UUID,
        invoice_id: UUID,
        amount: Decimal,
        reference: str | None = None,
    ) -> PaymentApplication:
        """Apply a payment to an invoice.

        The invoice row is locked for the whole operation, so the overpayment
        check and the write cannot interleave with a concurrent payment.
        ``total_paid`` is recomputed from every payment in the ledger rather
        than incremented. Fully paying a registration invoice activates the
        customer in the same transaction.

        Every call appends a new payment; deduplicating retries is up to the
        caller.

        Raises:
            ValidationError: If ``amount`` is not positive or has sub-cent digits.
            InvoiceNotFound: If the invoice does not belong to the tenant.
            AlreadyPaid: If the invoice is already settled.
            OverpaymentRejected: If the payment exceeds the remaining amount.
        """
        amount = Decimal(str(amount))
        if amount <= 0:
            raise ValidationError("Payment amount must be greater than zero")
        if has_sub_cent_digits(amount):
            raise ValidationError("Payment amount cannot have more than two decimal places")

        with transaction(self.db):
            invoice = self.invoice_repo.get_for_update(invoice_id, tenant_id)
            if not invoice:
                raise InvoiceNotFound(invoice_id)
            if invoice.is_paid:
                raise AlreadyPaid(invoice_id)

            total_amount = Decimal(str(invoice.total_amount))
            remaining = total_amount - self.payment_repo.get_total_paid(invoice_id)
            if amount > remaining:
                logger.warning(
                    "Rejected payment of %s on invoice %s, remaining %s",
                    amount,
                    invoice_id,
                    remaining,
                )
                raise OverpaymentRejected(remaining)

            payment = self.payment_repo.add(tenant_id, invoice_id, amount, reference)

            total_paid = self.payment_repo.get_total_paid(invoice_id)
            invoice.total_paid = total_paid  # type: ignore[assignment]
            invoice.is_paid = total_paid >= total_amount  # type: ignore[assignment]

            activated = False
            if invoice.is_paid:
                invoice.paid_at = utc_now()  # type: ignore[assignment]
                if invoice.invoice_type == InvoiceType.REGISTRATION.value:
                    activated = self.customer_repo.activate(
                        UUID(str(invoice.customer_id)), tenant_id
                    )

        self.db.refresh(invoice)
        self.db.refresh(payment)

        if activated:
            logger.info(
                "Registration invoice %s settled, customer %s activated",
                invoice_id,
                invoice.customer_id,
            )
        return PaymentApplication(payment=payment, invoice=invoice, customer_activated=activated)

    def get_payments(self, tenant_id: UUID, invoice_id: UUID) -> list[Payment]:
        if not self.invoice_repo.get_by_id(invoice_id, tenant_id):
            raise InvoiceNotFound(invoice_id)
        return self.payment_repo.get_by_invoice_id(invoice_id, tenant_id)
