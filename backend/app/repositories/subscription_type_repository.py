from uuid import UUID

from sqlalchemy.orm import Session

from app.models.subscription_type import SubscriptionType
from app.schemas.subscription_type import SubscriptionTypeCreate


class SubscriptionTypeRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_all(self, tenant_id: UUID) -> list[SubscriptionType]:
        return (
            self.db.query(SubscriptionType)
            .filter(SubscriptionType.tenant_id == tenant_id)
            .order_by(SubscriptionType.name.asc())
            .all()
        )

    def get_by_id(self, subscription_type_id: UUID, tenant_id: UUID) -> SubscriptionType | None:
        return (
            self.db.query(SubscriptionType)
            .filter(
                SubscriptionType.id == subscription_type_id,
                SubscriptionType.tenant_id == tenant_id,
            )
            .first()
        )

    def create(self, data: SubscriptionTypeCreate, tenant_id: UUID) -> SubscriptionType:
        subscription_type = SubscriptionType(**data.model_dump(), tenant_id=tenant_id)
        self.db.add(subscription_type)
        self.db.commit()
        self.db.refresh(subscription_type)
        return subscription_type
