from datetime import date
from decimal import Decimal
from uuid import UUID

from sqlalchemy.orm import Session

from app.models.invoice import REGISTRATION_USAGE_MONTH, Invoice, InvoiceType


class InvoiceRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_all(
        self,
        tenant_id: UUID,
        skip: int = 0,
        limit: int = 100,
        customer_id: UUID | None = None,
        usage_month: str | None = None,
        invoice_type: InvoiceType | None = None,
        is_paid: bool | None = None,
    ) -> list[Invoice]:
        query = self.db.query(Invoice).filter(Invoice.tenant_id == tenant_id)

        if customer_id:
            query = query.filter(Invoice.customer_id == customer_id)
        if usage_month:
            query = query.filter(Invoice.usage_month == usage_month)
        if invoice_type:
            query = query.filter(Invoice.invoice_type == invoice_type.value)
        if is_paid is not None:
            query = query.filter(Invoice.is_paid.is_(is_paid))

        return query.order_by(Invoice.created_at.desc()).offset(skip).limit(limit).all()

    def count(self, tenant_id: UUID) -> int:
        return self.db.query(Invoice).filter(Invoice.tenant_id == tenant_id).count()

    def get_by_id(self, invoice_id: UUID, tenant_id: UUID) -> Invoice | None:
        return (
            self.db.query(Invoice)
            .filter(Invoice.id == invoice_id, Invoice.tenant_id == tenant_id)
            .first()
        )

    def get_for_update(self, invoice_id: UUID, tenant_id: UUID) -> Invoice | None:
        """Load an invoice holding a row lock until the transaction ends."""
        return (
            self.db.query(Invoice)
            .filter(Invoice.id == invoice_id, Invoice.tenant_id == tenant_id)
            .with_for_update()
            .populate_existing()
            .first()
        )

    def get_monthly(self, customer_id: UUID, usage_month: str, tenant_id: UUID) -> Invoice | None:
        return (
            self.db.query(Invoice)
            .filter(
                Invoice.customer_id == customer_id,
                Invoice.usage_month == usage_month,
                Invoice.invoice_type == InvoiceType.MONTHLY.value,
                Invoice.tenant_id == tenant_id,
            )
            .first()
        )

    def monthly_exists(self, customer_id: UUID, usage_month: str, tenant_id: UUID) -> bool:
        return self.get_monthly(customer_id, usage_month, tenant_id) is not None

    def add_monthly(
        self,
        tenant_id: UUID,
        customer_id: UUID,
        usage_month: str,
        usage_m3: Decimal,
        usage_amount: Decimal,
        abonemen: Decimal,
        maintenance_fee: Decimal,
        late_fee: Decimal,
        price_per_m3: Decimal,
        due_date: date | None,
    ) -> Invoice:
        invoice = Invoice(
            tenant_id=tenant_id,
            customer_id=customer_id,
            invoice_type=InvoiceType.MONTHLY.value,
            usage_month=usage_month,
            usage_m3=usage_m3,
            usage_amount=usage_amount,
            abonemen=abonemen,
            maintenance_fee=maintenance_fee,
            late_fee=late_fee,
            price_per_m3=price_per_m3,
            total_amount=usage_amount + abonemen + maintenance_fee + late_fee,
            total_paid=Decimal("0"),
            is_paid=False,
            due_date=due_date,
        )
        self.db.add(invoice)
        self.db.flush()
        return invoice

    def add_registration(self, tenant_id: UUID, customer_id: UUID, amount: Decimal) -> Invoice:
        invoice = Invoice(
            tenant_id=tenant_id,
            customer_id=customer_id,
            invoice_type=InvoiceType.REGISTRATION.value,
            usage_month=REGISTRATION_USAGE_MONTH,
            usage_m3=Decimal("0"),
            usage_amount=Decimal("0"),
            abonemen=Decimal("0"),
            maintenance_fee=Decimal("0"),
            late_fee=Decimal("0"),
            price_per_m3=Decimal("0"),
            total_amount=amount,
            total_paid=Decimal("0"),
            is_paid=False,
        )
        self.db.add(invoice)
        self.db.flush()
        return invoice
