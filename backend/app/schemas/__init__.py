from app.schemas.customer import CustomerCreate, CustomerRegistrationResponse, CustomerResponse
from app.schemas.invoice import (
    InvoiceResponse,
    MonthlyInvoiceGenerateRequest,
    MonthlyInvoiceGenerateResponse,
)
from app.schemas.payment import PaymentApplicationResponse, PaymentCreate, PaymentResponse
from app.schemas.subscription_type import SubscriptionTypeCreate, SubscriptionTypeResponse
from app.schemas.tariff import (
    BillSimulationRequest,
    BillSimulationResponse,
    ProgressiveRateCreate,
    ProgressiveRateResponse,
    TariffCategoryCreate,
    TariffCategoryResponse,
    TierCharge,
)
from app.schemas.water_usage import WaterUsageCreate, WaterUsageResponse

__all__ = [
    "BillSimulationRequest",
    "BillSimulationResponse",
    "CustomerCreate",
    "CustomerRegistrationResponse",
    "CustomerResponse",
    "InvoiceResponse",
    "MonthlyInvoiceGenerateRequest",
    "MonthlyInvoiceGenerateResponse",
    "PaymentApplicationResponse",
    "PaymentCreate",
    "PaymentResponse",
    "ProgressiveRateCreate",
    "ProgressiveRateResponse",
    "SubscriptionTypeCreate",
    "SubscriptionTypeResponse",
    "TariffCategoryCreate",
    "TariffCategoryResponse",
    "TierCharge",
    "WaterUsageCreate",
    "WaterUsageResponse",
]
