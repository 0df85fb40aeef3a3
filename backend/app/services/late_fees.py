"""Late fee carried onto a monthly invoice from an overdue previous one."""

from datetime import date
from decimal import Decimal
from typing import Any


def compute_late_fee(previous_invoice: Any | None, subscription_type: Any, as_of: date) -> Decimal:
    """Late fee for an unpaid previous-month invoice.

    ``late_fee_per_day`` accrues for each day past the previous invoice's due
    date, capped at ``max_late_fee`` when that cap is positive.
    """
    if previous_invoice is None or previous_invoice.is_paid or previous_invoice.due_date is None:
        return Decimal("0")

    days_overdue = (as_of - previous_invoice.due_date).days
    if days_overdue <= 0:
        return Decimal("0")

    fee = Decimal(str(subscription_type.late_fee_per_day)) * days_overdue
    cap = Decimal(str(subscription_type.max_late_fee))
    if cap > 0:
        fee = min(fee, cap)
    return fee
