"""Customer signup: an inactive customer plus its registration invoice."""

import logging
from decimal import Decimal
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.database import transaction
from app.core.errors import ConflictError, SubscriptionTypeNotFound
from app.models.customer import Customer
from app.models.invoice import Invoice
from app.models.shared import utc_now
from app.repositories.customer_repository import CustomerRepository
from app.repositories.invoice_repository import InvoiceRepository
from app.repositories.subscription_type_repository import SubscriptionTypeRepository
from app.schemas.customer import CustomerCreate

logger = logging.getLogger(__name__)


class CustomerRegistrationService:
    def __init__(self, db: Session):
        self.db = db
        self.customer_repo = CustomerRepository(db)
        self.invoice_repo = InvoiceRepository(db)
        self.subscription_type_repo = SubscriptionTypeRepository(db)

    def register(self, tenant_id: UUID, data: CustomerCreate) -> tuple[Customer, Invoice]:
        """Create an inactive customer and its registration invoice atomically.

        The customer becomes active once the registration invoice is fully
        paid. A plan without a registration fee yields an invoice that is
        settled on creation and an active customer.
        """
        subscription_type = self.subscription_type_repo.get_by_id(
            data.subscription_type_id, tenant_id
        )
        if not subscription_type:
            raise SubscriptionTypeNotFound(data.subscription_type_id)

        if self.customer_repo.meter_number_exists(data.meter_number, tenant_id):
            raise ConflictError(f"Meter number '{data.meter_number}' is already registered")

        fee = Decimal(str(subscription_type.registration_fee))
        try:
            with transaction(self.db):
                customer = self.customer_repo.add(data, tenant_id)
                invoice = self.invoice_repo.add_registration(
                    tenant_id, UUID(str(customer.id)), fee
                )
                if fee == 0:
                    invoice.is_paid = True  # type: ignore[assignment]
                    invoice.paid_at = utc_now()  # type: ignore[assignment]
                    customer.is_active = True  # type: ignore[assignment]
        except IntegrityError:
            # A concurrent registration took the meter number first.
            raise ConflictError(
                f"Meter number '{data.meter_number}' is already registered"
            ) from None

        self.db.refresh(customer)
        self.db.refresh(invoice)
        logger.info(
            "Registered customer %s (tenant %s) with registration fee %s",
            customer.id,
            tenant_id,
            fee,
        )
        return customer, invoice
