from app.repositories.customer_repository import CustomerRepository
from app.repositories.invoice_repository import InvoiceRepository
from app.repositories.payment_repository import PaymentRepository
from app.repositories.subscription_type_repository import SubscriptionTypeRepository
from app.repositories.tariff_repository import TariffRepository
from app.repositories.water_usage_repository import WaterUsageRepository

__all__ = [
    "CustomerRepository",
    "InvoiceRepository",
    "PaymentRepository",
    "SubscriptionTypeRepository",
    "TariffRepository",
    "WaterUsageRepository",
]
