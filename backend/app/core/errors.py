"""Error taxonomy for the billing core.

Every public service operation raises one of these instead of returning
status flags. Each class carries the HTTP status the API layer renders it
with; ``InfrastructureError`` is the only retryable one.
"""

from decimal import Decimal


class BillingError(Exception):
    """Base class for all billing core errors."""

    status_code = 400
    retryable = False

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BillingError):
    """Malformed input, e.g. a bad usage month or a negative volume."""

    status_code = 422


class NotFoundError(BillingError):
    """Entity absent, or owned by another tenant."""

    status_code = 404


class ConflictError(BillingError):
    """The requested change collides with existing state."""

    status_code = 409


class BusinessRuleError(BillingError):
    """Input is well formed but violates a billing rule."""

    status_code = 400


class InfrastructureError(BillingError):
    """Transient storage failure; callers may retry."""

    status_code = 503
    retryable = True


class InvalidUsageMonth(ValidationError):
    def __init__(self, value: str):
        super().__init__(f"Invalid usage month '{value}', expected YYYY-MM")
        self.value = value


class CustomerNotFound(NotFoundError):
    def __init__(self, customer_id: object):
        super().__init__(f"Customer {customer_id} not found")


class SubscriptionTypeNotFound(NotFoundError):
    def __init__(self, subscription_type_id: object):
        super().__init__(f"Subscription type {subscription_type_id} not found")


class TariffCategoryNotFound(NotFoundError):
    def __init__(self, category_id: object):
        super().__init__(f"Tariff category {category_id} not found")


class InvoiceNotFound(NotFoundError):
    def __init__(self, invoice_id: object):
        super().__init__(f"Invoice {invoice_id} not found")


class DuplicateMeterReading(ConflictError):
    def __init__(self, customer_id: object, usage_month: str):
        super().__init__(
            f"A meter reading for customer {customer_id} already exists for {usage_month}"
        )


class AlreadyPaid(ConflictError):
    def __init__(self, invoice_id: object):
        super().__init__(f"Invoice {invoice_id} is already paid")


class InvalidMeterReading(BusinessRuleError):
    pass


class NoTariffDefined(BusinessRuleError):
    def __init__(self, category_id: object = None):
        if category_id is None:
            super().__init__("No active progressive rates defined")
        else:
            super().__init__(
                f"No active progressive rates found for tariff category {category_id}"
            )


class OverpaymentRejected(BusinessRuleError):
    def __init__(self, remaining: Decimal):
        super().__init__(f"Payment exceeds the invoice total. Remaining amount: {remaining:.2f}")
        self.remaining = remaining
