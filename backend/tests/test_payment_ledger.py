"""Tests for PaymentLedgerService."""

from decimal import Decimal
from uuid import uuid4

import pytest

from app.core.errors import AlreadyPaid, InvoiceNotFound, OverpaymentRejected, ValidationError
from app.models.payment import Payment
from app.repositories.invoice_repository import InvoiceRepository
from app.services.payment_ledger import PaymentLedgerService
from tests.conftest import DEFAULT_TENANT_ID, OTHER_TENANT_ID, register_customer


@pytest.fixture
def ledger(db_session):
    return PaymentLedgerService(db_session)


@pytest.fixture
def monthly_invoice(db_session, customer):
    invoice = InvoiceRepository(db_session).add_monthly(
        tenant_id=DEFAULT_TENANT_ID,
        customer_id=customer.id,
        usage_month="2025-01",
        usage_m3=Decimal("25"),
        usage_amount=Decimal("35000"),
        abonemen=Decimal("10000"),
        maintenance_fee=Decimal("5000"),
        late_fee=Decimal("0"),
        price_per_m3=Decimal("1400"),
        due_date=None,
    )
    db_session.commit()
    return invoice


@pytest.fixture
def registration(db_session, subscription_type):
    """A fresh customer and its unpaid 50000 registration invoice."""
    return register_customer(db_session, DEFAULT_TENANT_ID, subscription_type.id, "MTR-REG")


class TestApplyPayment:
    def test_partial_payment(self, ledger, monthly_invoice):
        result = ledger.apply_payment(
            DEFAULT_TENANT_ID, monthly_invoice.id, Decimal("20000"), reference="TRX-1"
        )

        assert result.payment.amount == Decimal("20000")
        assert result.payment.reference == "TRX-1"
        assert result.invoice.total_paid == Decimal("20000")
        assert result.invoice.is_paid is False
        assert result.invoice.paid_at is None
        assert result.customer_activated is False

    def test_payments_add_up_to_settlement(self, ledger, monthly_invoice):
        for amount in ("10000", "15000", "25000"):
            result = ledger.apply_payment(DEFAULT_TENANT_ID, monthly_invoice.id, Decimal(amount))

        assert result.invoice.total_paid == Decimal("50000")
        assert result.invoice.is_paid is True
        assert result.invoice.paid_at is not None

    def test_total_is_recomputed_from_ledger(self, db_session, ledger, monthly_invoice):
        # A row written outside the ledger service still counts towards the total.
        db_session.add(
            Payment(tenant_id=DEFAULT_TENANT_ID, invoice_id=monthly_invoice.id, amount=5000)
        )
        db_session.commit()

        result = ledger.apply_payment(DEFAULT_TENANT_ID, monthly_invoice.id, Decimal("1000"))

        assert result.invoice.total_paid == Decimal("6000")

    def test_get_payments_oldest_first(self, ledger, monthly_invoice):
        ledger.apply_payment(DEFAULT_TENANT_ID, monthly_invoice.id, Decimal("100"), "A")
        ledger.apply_payment(DEFAULT_TENANT_ID, monthly_invoice.id, Decimal("200"), "B")

        payments = ledger.get_payments(DEFAULT_TENANT_ID, monthly_invoice.id)

        assert [p.reference for p in payments] == ["A", "B"]

    def test_get_payments_unknown_invoice(self, ledger):
        with pytest.raises(InvoiceNotFound):
            ledger.get_payments(DEFAULT_TENANT_ID, uuid4())


class TestApplyPaymentRejections:
    def test_overpayment_reports_remaining(self, db_session, ledger, monthly_invoice):
        ledger.apply_payment(DEFAULT_TENANT_ID, monthly_invoice.id, Decimal("30000"))

        with pytest.raises(OverpaymentRejected) as exc_info:
            ledger.apply_payment(DEFAULT_TENANT_ID, monthly_invoice.id, Decimal("30000"))

        assert exc_info.value.remaining == Decimal("20000")
        assert "20000.00" in exc_info.value.message
        db_session.refresh(monthly_invoice)
        assert monthly_invoice.total_paid == Decimal("30000")
        assert db_session.query(Payment).count() == 1

    def test_overpayment_on_untouched_invoice(self, db_session, ledger, monthly_invoice):
        with pytest.raises(OverpaymentRejected):
            ledger.apply_payment(DEFAULT_TENANT_ID, monthly_invoice.id, Decimal("50000.01"))

        db_session.refresh(monthly_invoice)
        assert monthly_invoice.total_paid == Decimal("0")
        assert db_session.query(Payment).count() == 0

    def test_already_paid(self, ledger, monthly_invoice):
        ledger.apply_payment(DEFAULT_TENANT_ID, monthly_invoice.id, Decimal("50000"))
        with pytest.raises(AlreadyPaid):
            ledger.apply_payment(DEFAULT_TENANT_ID, monthly_invoice.id, Decimal("1"))

    @pytest.mark.parametrize("amount", ["0", "-100"])
    def test_non_positive_amount(self, ledger, monthly_invoice, amount):
        with pytest.raises(ValidationError):
            ledger.apply_payment(DEFAULT_TENANT_ID, monthly_invoice.id, Decimal(amount))

    @pytest.mark.parametrize("amount", ["0.001", "100.505"])
    def test_sub_cent_amount(self, db_session, ledger, monthly_invoice, amount):
        with pytest.raises(ValidationError):
            ledger.apply_payment(DEFAULT_TENANT_ID, monthly_invoice.id, Decimal(amount))

        assert db_session.query(Payment).count() == 0

    def test_trailing_zeros_are_accepted(self, ledger, monthly_invoice):
        result = ledger.apply_payment(DEFAULT_TENANT_ID, monthly_invoice.id, Decimal("100.500"))
        assert result.payment.amount == Decimal("100.50")

    def test_unknown_invoice(self, ledger):
        with pytest.raises(InvoiceNotFound):
            ledger.apply_payment(DEFAULT_TENANT_ID, uuid4(), Decimal("100"))

    def test_invoice_of_another_tenant(self, db_session, ledger, monthly_invoice):
        with pytest.raises(InvoiceNotFound):
            ledger.apply_payment(OTHER_TENANT_ID, monthly_invoice.id, Decimal("100"))

        db_session.refresh(monthly_invoice)
        assert monthly_invoice.total_paid == Decimal("0")


class TestCustomerActivation:
    def test_full_registration_payment_activates(self, db_session, ledger, registration):
        customer, invoice = registration
        assert customer.is_active is False

        result = ledger.apply_payment(DEFAULT_TENANT_ID, invoice.id, Decimal("50000"))

        assert result.customer_activated is True
        db_session.refresh(customer)
        assert customer.is_active is True

    def test_partial_registration_payment_does_not_activate(
        self, db_session, ledger, registration
    ):
        customer, invoice = registration

        first = ledger.apply_payment(DEFAULT_TENANT_ID, invoice.id, Decimal("20000"))
        db_session.refresh(customer)
        assert first.customer_activated is False
        assert customer.is_active is False

        second = ledger.apply_payment(DEFAULT_TENANT_ID, invoice.id, Decimal("30000"))
        assert second.customer_activated is True

    def test_monthly_payment_never_toggles_activation(self, db_session, ledger, registration):
        customer, invoice = registration
        ledger.apply_payment(DEFAULT_TENANT_ID, invoice.id, Decimal("50000"))
        monthly = InvoiceRepository(db_session).add_monthly(
            tenant_id=DEFAULT_TENANT_ID,
            customer_id=customer.id,
            usage_month="2025-01",
            usage_m3=Decimal("5"),
            usage_amount=Decimal("5000"),
            abonemen=Decimal("10000"),
            maintenance_fee=Decimal("5000"),
            late_fee=Decimal("0"),
            price_per_m3=Decimal("1000"),
            due_date=None,
        )
        db_session.commit()

        result = ledger.apply_payment(DEFAULT_TENANT_ID, monthly.id, Decimal("20000"))

        assert result.customer_activated is False
        db_session.refresh(customer)
        assert customer.is_active is True

    def test_monthly_payment_does_not_activate_inactive_customer(
        self, db_session, ledger, customer, monthly_invoice
    ):
        result = ledger.apply_payment(DEFAULT_TENANT_ID, monthly_invoice.id, Decimal("50000"))

        assert result.invoice.is_paid is True
        assert result.customer_activated is False
        db_session.refresh(customer)
        assert customer.is_active is False
