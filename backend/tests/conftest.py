"""Shared test fixtures for all test modules."""

import contextlib
import uuid
from decimal import Decimal

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.core import database as db_module
from app.core.database import Base, get_db
from app.models.tenant import Tenant
from app.repositories.subscription_type_repository import SubscriptionTypeRepository
from app.repositories.tariff_repository import TariffRepository
from app.schemas.customer import CustomerCreate
from app.schemas.subscription_type import SubscriptionTypeCreate
from app.schemas.tariff import ProgressiveRateCreate, TariffCategoryCreate
from app.services.customer_registration import CustomerRegistrationService

# In-memory SQLite with StaticPool so every connection shares one database.
_test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
_TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_test_engine)

DEFAULT_TENANT_ID = uuid.UUID("00000000-0000-0000-0000-000000000001")
OTHER_TENANT_ID = uuid.UUID("00000000-0000-0000-0000-000000000002")

# Residential schedule used across the billing tests:
# 0-10 m3 @ 1000, 10-20 m3 @ 1500, 20+ m3 @ 2000.
RESIDENTIAL_TIERS = [
    (Decimal("0"), Decimal("10"), Decimal("1000")),
    (Decimal("10"), Decimal("20"), Decimal("1500")),
    (Decimal("20"), None, Decimal("2000")),
]


def _seed_tenants(session: Session) -> None:
    for tenant_id, name in (
        (DEFAULT_TENANT_ID, "PDAM Tirta Default"),
        (OTHER_TENANT_ID, "PDAM Tirta Other"),
    ):
        if session.query(Tenant).filter(Tenant.id == tenant_id).first() is None:
            session.add(Tenant(id=tenant_id, name=name))
    session.commit()


@pytest.fixture(autouse=True)
def setup_database():
    """Create tables before each test and clear all data after.

    Patches the module-level engine and SessionLocal so application code
    uses the in-memory test database.
    """
    original_engine = db_module.engine
    original_session = db_module.SessionLocal
    db_module.engine = _test_engine
    db_module.SessionLocal = _TestSessionLocal

    Base.metadata.create_all(bind=_test_engine)

    session = _TestSessionLocal()
    try:
        _seed_tenants(session)
    finally:
        session.close()

    yield
    with _test_engine.connect() as conn:
        conn.execute(text("PRAGMA foreign_keys = OFF"))
        for table in reversed(Base.metadata.sorted_tables):
            with contextlib.suppress(OperationalError):
                conn.execute(table.delete())
        conn.execute(text("PRAGMA foreign_keys = ON"))
        conn.commit()

    db_module.engine = original_engine
    db_module.SessionLocal = original_session


def create_tariff_category(db, tenant_id, tiers=RESIDENTIAL_TIERS, code="R1"):
    """Create a tariff category with the given (min, max, price) tiers."""
    repo = TariffRepository(db)
    category = repo.create_category(
        TariffCategoryCreate(code=code, name=f"Tariff {code}"), tenant_id
    )
    for order, (min_volume, max_volume, price) in enumerate(tiers):
        repo.create_rate(
            ProgressiveRateCreate(
                category_id=category.id,
                min_volume=min_volume,
                max_volume=max_volume,
                price_per_unit=price,
                display_order=order,
            ),
            tenant_id,
        )
    return category


def create_subscription_type(db, tenant_id, tariff_category_id, **fees):
    data = {
        "name": "Rumah Tangga",
        "tariff_category_id": tariff_category_id,
        "registration_fee": Decimal("50000"),
        "monthly_fee": Decimal("10000"),
        "maintenance_fee": Decimal("5000"),
    }
    data.update(fees)
    return SubscriptionTypeRepository(db).create(SubscriptionTypeCreate(**data), tenant_id)


def register_customer(db, tenant_id, subscription_type_id, meter_number="MTR-0001"):
    """Register a customer; returns (customer, registration_invoice)."""
    return CustomerRegistrationService(db).register(
        tenant_id,
        CustomerCreate(
            subscription_type_id=subscription_type_id,
            meter_number=meter_number,
            name=f"Customer {meter_number}",
        ),
    )


@pytest.fixture
def default_tenant_id():
    return DEFAULT_TENANT_ID


@pytest.fixture
def other_tenant_id():
    return OTHER_TENANT_ID


@pytest.fixture
def db_session():
    """Create a database session for direct service testing."""
    gen = get_db()
    db = next(gen)
    try:
        yield db
    finally:
        for _ in gen:
            pass


@pytest.fixture
def tariff_category(db_session):
    return create_tariff_category(db_session, DEFAULT_TENANT_ID)


@pytest.fixture
def subscription_type(db_session, tariff_category):
    return create_subscription_type(db_session, DEFAULT_TENANT_ID, tariff_category.id)


@pytest.fixture
def customer(db_session, subscription_type):
    customer, _ = register_customer(db_session, DEFAULT_TENANT_ID, subscription_type.id)
    return customer
