"""Tests for MeterReadingService."""

from decimal import Decimal
from unittest.mock import patch
from uuid import uuid4

import pytest

from app.core.errors import (
    CustomerNotFound,
    DuplicateMeterReading,
    InvalidMeterReading,
    InvalidUsageMonth,
    NoTariffDefined,
    ValidationError,
)
from app.models.invoice import Invoice
from app.models.water_usage import WaterUsage
from app.services.meter_reading_service import MeterReadingService
from tests.conftest import (
    DEFAULT_TENANT_ID,
    OTHER_TENANT_ID,
    create_subscription_type,
    register_customer,
)


@pytest.fixture
def service(db_session):
    return MeterReadingService(db_session)


class TestRecord:
    def test_first_reading_starts_at_zero(self, service, customer):
        usage = service.record(DEFAULT_TENANT_ID, customer.id, "2025-01", Decimal("25"))

        assert usage.meter_start == Decimal("0")
        assert usage.meter_end == Decimal("25")
        assert usage.usage_m3 == Decimal("25")
        assert usage.amount_calculated == Decimal("35000")

    def test_start_carries_over_from_previous_month(self, service, customer):
        service.record(DEFAULT_TENANT_ID, customer.id, "2025-01", Decimal("25"))
        usage = service.record(DEFAULT_TENANT_ID, customer.id, "2025-02", Decimal("32"))

        assert usage.meter_start == Decimal("25")
        assert usage.usage_m3 == Decimal("7")
        assert usage.amount_calculated == Decimal("7000")

    def test_previous_month_across_year_boundary(self, service, customer):
        service.record(DEFAULT_TENANT_ID, customer.id, "2024-12", Decimal("100"))
        usage = service.record(DEFAULT_TENANT_ID, customer.id, "2025-01", Decimal("110"))
        assert usage.meter_start == Decimal("100")

    def test_gap_month_starts_at_zero(self, service, customer):
        service.record(DEFAULT_TENANT_ID, customer.id, "2025-01", Decimal("20"))
        usage = service.record(DEFAULT_TENANT_ID, customer.id, "2025-03", Decimal("30"))
        assert usage.meter_start == Decimal("0")

    def test_unchanged_meter_records_zero_usage(self, service, customer):
        service.record(DEFAULT_TENANT_ID, customer.id, "2025-01", Decimal("20"))
        usage = service.record(DEFAULT_TENANT_ID, customer.id, "2025-02", Decimal("20"))

        assert usage.usage_m3 == Decimal("0")
        assert usage.amount_calculated == Decimal("0")

    def test_does_not_touch_prior_months_or_invoice(self, db_session, service, customer):
        first = service.record(DEFAULT_TENANT_ID, customer.id, "2025-01", Decimal("20"))
        service.record(DEFAULT_TENANT_ID, customer.id, "2025-02", Decimal("30"))

        db_session.refresh(first)
        assert first.meter_end == Decimal("20")
        assert first.usage_m3 == Decimal("20")
        # Only the registration invoice exists.
        assert db_session.query(Invoice).count() == 1


class TestRecordRejections:
    def test_reading_below_previous_month(self, db_session, service, customer):
        service.record(DEFAULT_TENANT_ID, customer.id, "2025-01", Decimal("50"))

        with pytest.raises(InvalidMeterReading):
            service.record(DEFAULT_TENANT_ID, customer.id, "2025-02", Decimal("49"))
        assert db_session.query(WaterUsage).count() == 1

    def test_duplicate_month(self, service, customer):
        service.record(DEFAULT_TENANT_ID, customer.id, "2025-01", Decimal("10"))
        with pytest.raises(DuplicateMeterReading):
            service.record(DEFAULT_TENANT_ID, customer.id, "2025-01", Decimal("12"))

    def test_concurrent_duplicate_hits_unique_constraint(self, db_session, service, customer):
        service.record(DEFAULT_TENANT_ID, customer.id, "2025-01", Decimal("10"))

        # Simulate a request that read before the other one committed.
        with patch.object(service.usage_repo, "get_for_month", return_value=None):
            with pytest.raises(DuplicateMeterReading):
                service.record(DEFAULT_TENANT_ID, customer.id, "2025-01", Decimal("12"))

        assert db_session.query(WaterUsage).count() == 1
        [usage] = db_session.query(WaterUsage).all()
        assert usage.meter_end == Decimal("10")

    def test_sub_cent_reading(self, db_session, service, customer):
        with pytest.raises(ValidationError):
            service.record(DEFAULT_TENANT_ID, customer.id, "2025-01", Decimal("10.005"))
        assert db_session.query(WaterUsage).count() == 0

    def test_invalid_month(self, service, customer):
        with pytest.raises(InvalidUsageMonth):
            service.record(DEFAULT_TENANT_ID, customer.id, "2025-13", Decimal("10"))

    def test_negative_reading(self, service, customer):
        with pytest.raises(ValidationError):
            service.record(DEFAULT_TENANT_ID, customer.id, "2025-01", Decimal("-1"))

    def test_reading_beyond_meter_range(self, service, customer):
        with pytest.raises(ValidationError):
            service.record(DEFAULT_TENANT_ID, customer.id, "2025-01", Decimal("100000000"))

    def test_usage_above_monthly_limit(self, service, customer):
        with patch("app.services.meter_reading_service.settings.MONTHLY_USAGE_MAX_M3", 100):
            with pytest.raises(InvalidMeterReading):
                service.record(DEFAULT_TENANT_ID, customer.id, "2025-01", Decimal("101"))

    def test_unknown_customer(self, service):
        with pytest.raises(CustomerNotFound):
            service.record(DEFAULT_TENANT_ID, uuid4(), "2025-01", Decimal("10"))

    def test_customer_of_another_tenant(self, service, customer):
        with pytest.raises(CustomerNotFound):
            service.record(OTHER_TENANT_ID, customer.id, "2025-01", Decimal("10"))

    def test_plan_without_tariff(self, db_session, service):
        plan = create_subscription_type(db_session, DEFAULT_TENANT_ID, None)
        customer, _ = register_customer(db_session, DEFAULT_TENANT_ID, plan.id, "MTR-NOTARIFF")

        with pytest.raises(NoTariffDefined):
            service.record(DEFAULT_TENANT_ID, customer.id, "2025-01", Decimal("10"))
        assert db_session.query(WaterUsage).count() == 0
