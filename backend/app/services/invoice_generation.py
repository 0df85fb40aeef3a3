"""Monthly invoice generation from recorded water usage."""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import transaction
from app.core.errors import (
    BusinessRuleError,
    CustomerNotFound,
    NotFoundError,
    SubscriptionTypeNotFound,
)
from app.models.subscription_type import SubscriptionType
from app.models.water_usage import WaterUsage
from app.repositories.customer_repository import CustomerRepository
from app.repositories.invoice_repository import InvoiceRepository
from app.repositories.subscription_type_repository import SubscriptionTypeRepository
from app.repositories.water_usage_repository import WaterUsageRepository
from app.services.billing_months import due_date_for, parse_usage_month, previous_usage_month
from app.services.late_fees import compute_late_fee
from app.services.tariff_service import TariffService

logger = logging.getLogger(__name__)


@dataclass
class MonthlyGenerationResult:
    """Aggregate outcome of one monthly generation run."""

    usage_month: str
    created: int = 0
    skipped: int = 0
    failed: int = 0


class InvoiceGenerationService:
    """Turns a month's water usage into monthly invoices."""

    def __init__(self, db: Session):
        self.db = db
        self.customer_repo = CustomerRepository(db)
        self.subscription_type_repo = SubscriptionTypeRepository(db)
        self.usage_repo = WaterUsageRepository(db)
        self.invoice_repo = InvoiceRepository(db)
        self.tariff_service = TariffService(db)

    def generate_monthly(
        self,
        tenant_id: UUID,
        usage_month: str,
        as_of: date | None = None,
    ) -> MonthlyGenerationResult:
        """Generate monthly invoices for every usage record of ``usage_month``.

        Usage that already has a monthly invoice is skipped, so re-running a
        month is safe. Each row is invoiced in its own transaction: a row that
        cannot be priced or loaded is counted as failed and the batch moves on.
        The storage unique constraint on (customer, month, type) settles races
        with a concurrent run; the loser counts the row as skipped.

        Args:
            tenant_id: Tenant whose usage is billed.
            usage_month: Month to bill, ``YYYY-MM``.
            as_of: Date used to assess late fees (defaults to today).

        Returns:
            Counts of created, skipped and failed rows.
        """
        parse_usage_month(usage_month)
        as_of = as_of or date.today()
        result = MonthlyGenerationResult(usage_month=usage_month)

        usages = self.usage_repo.get_by_month(tenant_id, usage_month)
        for usage in usages:
            customer_id = UUID(str(usage.customer_id))
            if self.invoice_repo.monthly_exists(customer_id, usage_month, tenant_id):
                result.skipped += 1
                continue

            try:
                with transaction(self.db):
                    self._invoice_usage(tenant_id, usage, as_of)
            except IntegrityError:
                logger.info(
                    "Monthly invoice for customer %s %s created concurrently, skipping",
                    customer_id,
                    usage_month,
                )
                result.skipped += 1
            except (NotFoundError, BusinessRuleError) as e:
                logger.warning(
                    "Could not invoice usage %s for customer %s: %s",
                    usage.id,
                    customer_id,
                    e.message,
                )
                result.failed += 1
            else:
                result.created += 1

        logger.info(
            "Generated invoices for %s (tenant %s): created=%d skipped=%d failed=%d",
            usage_month,
            tenant_id,
            result.created,
            result.skipped,
            result.failed,
        )
        return result

    def _invoice_usage(self, tenant_id: UUID, usage: WaterUsage, as_of: date) -> None:
        customer_id = UUID(str(usage.customer_id))
        usage_month = str(usage.usage_month)

        customer = self.customer_repo.get_by_id(customer_id, tenant_id)
        if not customer:
            raise CustomerNotFound(customer_id)

        subscription_type = self.subscription_type_repo.get_by_id(
            UUID(str(customer.subscription_type_id)), tenant_id
        )
        if not subscription_type:
            raise SubscriptionTypeNotFound(customer.subscription_type_id)

        # Always re-price at generation time; usage.amount_calculated is informational.
        usage_m3 = Decimal(str(usage.usage_m3))
        quote = self.tariff_service.quote_for_subscription(tenant_id, subscription_type, usage_m3)

        abonemen = Decimal(str(subscription_type.monthly_fee))
        maintenance_fee = Decimal(str(subscription_type.maintenance_fee))
        late_fee = self._late_fee(tenant_id, customer_id, usage_month, subscription_type, as_of)

        total = quote.total_amount + abonemen + maintenance_fee + late_fee
        if total <= 0 or total > settings.INVOICE_TOTAL_MAX:
            raise BusinessRuleError(f"Invoice total {total} is outside the allowed range")

        self.invoice_repo.add_monthly(
            tenant_id=tenant_id,
            customer_id=customer_id,
            usage_month=usage_month,
            usage_m3=usage_m3,
            usage_amount=quote.total_amount,
            abonemen=abonemen,
            maintenance_fee=maintenance_fee,
            late_fee=late_fee,
            price_per_m3=quote.average_price,
            due_date=due_date_for(usage_month, settings.INVOICE_DUE_DAY),
        )

    def _late_fee(
        self,
        tenant_id: UUID,
        customer_id: UUID,
        usage_month: str,
        subscription_type: SubscriptionType,
        as_of: date,
    ) -> Decimal:
        if not settings.LATE_FEES_ENABLED:
            return Decimal("0")
        previous = self.invoice_repo.get_monthly(
            customer_id, previous_usage_month(usage_month), tenant_id
        )
        return compute_late_fee(previous, subscription_type, as_of)
