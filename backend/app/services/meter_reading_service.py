"""Meter reading ingestion: turns an end-of-month reading into a usage record."""

import logging
from decimal import Decimal
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import transaction
from app.core.errors import (
    CustomerNotFound,
    DuplicateMeterReading,
    InvalidMeterReading,
    SubscriptionTypeNotFound,
    ValidationError,
)
from app.models.water_usage import WaterUsage
from app.repositories.customer_repository import CustomerRepository
from app.repositories.subscription_type_repository import SubscriptionTypeRepository
from app.repositories.water_usage_repository import WaterUsageRepository
from app.services.billing_months import parse_usage_month, previous_usage_month
from app.services.tariff_engine import has_sub_cent_digits
from app.services.tariff_service import TariffService

logger = logging.getLogger(__name__)


class MeterReadingService:
    """Records monthly meter readings."""

    def __init__(self, db: Session):
        self.db = db
        self.customer_repo = CustomerRepository(db)
        self.subscription_type_repo = SubscriptionTypeRepository(db)
        self.usage_repo = WaterUsageRepository(db)
        self.tariff_service = TariffService(db)

    def record(
        self,
        tenant_id: UUID,
        customer_id: UUID,
        usage_month: str,
        meter_end: Decimal,
    ) -> WaterUsage:
        """Record the meter reading taken at the end of ``usage_month``.

        ``meter_start`` is the previous calendar month's ``meter_end`` for the
        same customer, or 0 when there is no such reading. Prior months are
        never touched and no invoice is created.

        Raises:
            InvalidUsageMonth: If ``usage_month`` is not ``YYYY-MM``.
            ValidationError: If the reading is negative, beyond the meter's range
                or has sub-cent digits.
            CustomerNotFound: If the customer does not belong to the tenant.
            DuplicateMeterReading: If the month already has a reading.
            InvalidMeterReading: If the reading is below ``meter_start`` or the
                derived usage exceeds the monthly limit.
            NoTariffDefined: If the customer's plan has no active tariff tiers.
        """
        parse_usage_month(usage_month)
        meter_end = Decimal(str(meter_end))
        if meter_end < 0:
            raise ValidationError("Meter end reading cannot be negative")
        if meter_end > settings.METER_READING_MAX:
            raise ValidationError("Meter reading exceeds maximum allowed value")
        if has_sub_cent_digits(meter_end):
            raise ValidationError("Meter reading cannot have more than two decimal places")

        customer = self.customer_repo.get_by_id(customer_id, tenant_id)
        if not customer:
            raise CustomerNotFound(customer_id)

        if self.usage_repo.get_for_month(customer_id, usage_month, tenant_id):
            raise DuplicateMeterReading(customer_id, usage_month)

        previous = self.usage_repo.get_for_month(
            customer_id, previous_usage_month(usage_month), tenant_id
        )
        meter_start = Decimal(str(previous.meter_end)) if previous else Decimal("0")

        if meter_end < meter_start:
            raise InvalidMeterReading(
                f"Meter end reading {meter_end} is lower than the previous reading {meter_start}"
            )

        usage_m3 = meter_end - meter_start
        if usage_m3 > settings.MONTHLY_USAGE_MAX_M3:
            raise InvalidMeterReading(
                f"Usage of {usage_m3} m³ exceeds the monthly limit of "
                f"{settings.MONTHLY_USAGE_MAX_M3} m³"
            )

        subscription_type = self.subscription_type_repo.get_by_id(
            UUID(str(customer.subscription_type_id)), tenant_id
        )
        if not subscription_type:
            raise SubscriptionTypeNotFound(customer.subscription_type_id)
        quote = self.tariff_service.quote_for_subscription(tenant_id, subscription_type, usage_m3)

        try:
            with transaction(self.db):
                usage = self.usage_repo.add(
                    tenant_id=tenant_id,
                    customer_id=customer_id,
                    usage_month=usage_month,
                    meter_start=meter_start,
                    meter_end=meter_end,
                    amount_calculated=quote.total_amount,
                )
        except IntegrityError:
            # A concurrent request recorded the same month first.
            raise DuplicateMeterReading(customer_id, usage_month) from None

        self.db.refresh(usage)
        logger.info(
            "Recorded %s m3 for customer %s in %s (tenant %s)",
            usage_m3,
            customer_id,
            usage_month,
            tenant_id,
        )
        return usage
