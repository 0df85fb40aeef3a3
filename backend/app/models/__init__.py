from app.models.customer import Customer
from app.models.invoice import REGISTRATION_USAGE_MONTH, Invoice, InvoiceType
from app.models.payment import Payment
from app.models.subscription_type import SubscriptionType
from app.models.tariff_category import ProgressiveRate, TariffCategory, TariffType
from app.models.tenant import Tenant
from app.models.water_usage import WaterUsage

__all__ = [
    "Customer",
    "Invoice",
    "InvoiceType",
    "Payment",
    "ProgressiveRate",
    "REGISTRATION_USAGE_MONTH",
    "SubscriptionType",
    "TariffCategory",
    "TariffType",
    "Tenant",
    "WaterUsage",
]
