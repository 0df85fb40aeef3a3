from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from app.services.late_fees import compute_late_fee

PLAN = SimpleNamespace(late_fee_per_day=Decimal("500"), max_late_fee=Decimal("2000"))


def _invoice(is_paid=False, due_date=date(2025, 2, 20)):
    return SimpleNamespace(is_paid=is_paid, due_date=due_date)


def test_no_previous_invoice():
    assert compute_late_fee(None, PLAN, date(2025, 3, 1)) == Decimal("0")


def test_paid_previous_invoice():
    assert compute_late_fee(_invoice(is_paid=True), PLAN, date(2025, 3, 1)) == Decimal("0")


def test_previous_invoice_without_due_date():
    assert compute_late_fee(_invoice(due_date=None), PLAN, date(2025, 3, 1)) == Decimal("0")


def test_on_due_date():
    assert compute_late_fee(_invoice(), PLAN, date(2025, 2, 20)) == Decimal("0")


def test_accrues_per_day():
    assert compute_late_fee(_invoice(), PLAN, date(2025, 2, 23)) == Decimal("1500")


def test_capped():
    assert compute_late_fee(_invoice(), PLAN, date(2025, 3, 31)) == Decimal("2000")


def test_zero_cap_means_uncapped():
    plan = SimpleNamespace(late_fee_per_day=Decimal("500"), max_late_fee=Decimal("0"))
    assert compute_late_fee(_invoice(), plan, date(2025, 3, 2)) == Decimal("5000")
