from uuid import UUID

from sqlalchemy.orm import Session

from app.models.customer import Customer
from app.schemas.customer import CustomerCreate


class CustomerRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_all(self, tenant_id: UUID, skip: int = 0, limit: int = 100) -> list[Customer]:
        return (
            self.db.query(Customer)
            .filter(Customer.tenant_id == tenant_id)
            .order_by(Customer.created_at.asc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def get_by_id(self, customer_id: UUID, tenant_id: UUID) -> Customer | None:
        return (
            self.db.query(Customer)
            .filter(Customer.id == customer_id, Customer.tenant_id == tenant_id)
            .first()
        )

    def meter_number_exists(self, meter_number: str, tenant_id: UUID) -> bool:
        query = self.db.query(Customer).filter(
            Customer.meter_number == meter_number,
            Customer.tenant_id == tenant_id,
        )
        return query.first() is not None

    def add(self, data: CustomerCreate, tenant_id: UUID) -> Customer:
        """Stage a new, inactive customer in the current transaction."""
        customer = Customer(**data.model_dump(), tenant_id=tenant_id, is_active=False)
        self.db.add(customer)
        self.db.flush()
        return customer

    def activate(self, customer_id: UUID, tenant_id: UUID) -> bool:
        """Flag a customer active. Returns True only on an inactive -> active change."""
        customer = self.get_by_id(customer_id, tenant_id)
        if not customer or customer.is_active:
            return False
        customer.is_active = True  # type: ignore[assignment]
        self.db.flush()
        return True
