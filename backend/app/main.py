import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.errors import BillingError
from app.routers import (
    customers,
    invoices,
    payments,
    subscription_types,
    tariffs,
    water_usages,
)

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
)
logger = logging.getLogger(__name__)

OPENAPI_TAGS = [
    {"name": "Customers", "description": "Register customers and read their state."},
    {"name": "Subscription Types", "description": "Customer plans and their flat fees."},
    {"name": "Tariffs", "description": "Progressive tariff tiers and bill simulation."},
    {"name": "Water Usage", "description": "Record monthly meter readings."},
    {"name": "Invoices", "description": "Generate and query monthly and registration invoices."},
    {"name": "Payments", "description": "Apply payments against invoices."},
]

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.version,
    description=(
        "Multi-tenant water utility billing API. Records meter readings, prices usage "
        "with progressive tariffs, generates monthly invoices and reconciles payments."
    ),
    openapi_tags=OPENAPI_TAGS,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Total-Count"],
)


@app.exception_handler(BillingError)
async def billing_error_handler(request: Request, exc: BillingError) -> JSONResponse:
    if exc.retryable:
        logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    else:
        logger.info("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


app.include_router(customers.router, prefix="/v1/customers", tags=["Customers"])
app.include_router(
    subscription_types.router, prefix="/v1/subscription_types", tags=["Subscription Types"]
)
app.include_router(tariffs.router, prefix="/v1/tariffs", tags=["Tariffs"])
app.include_router(water_usages.router, prefix="/v1/water_usages", tags=["Water Usage"])
app.include_router(invoices.router, prefix="/v1/invoices", tags=["Invoices"])
app.include_router(payments.router, prefix="/v1/payments", tags=["Payments"])


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@app.get("/")
async def root() -> dict[str, str]:
    return {
        "app": settings.APP_NAME,
        "version": settings.version,
        "status": "running",
    }
