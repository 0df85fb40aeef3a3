"""Tariff lookup and bill simulation on top of the pure tariff engine."""

from decimal import Decimal
from typing import Any
from uuid import UUID

from sqlalchemy.orm import Session

from app.core.errors import BusinessRuleError, NoTariffDefined, TariffCategoryNotFound
from app.models.tariff_category import ProgressiveRate, TariffCategory
from app.repositories.tariff_repository import TariffRepository
from app.schemas.tariff import ProgressiveRateCreate
from app.services import tariff_engine
from app.services.tariff_engine import TariffQuote


class TariffService:
    """Resolves tier schedules for a tenant and prices volumes against them."""

    def __init__(self, db: Session):
        self.db = db
        self.tariff_repo = TariffRepository(db)

    def get_category(self, tenant_id: UUID, category_id: UUID) -> TariffCategory:
        category = self.tariff_repo.get_category(category_id, tenant_id)
        if not category:
            raise TariffCategoryNotFound(category_id)
        return category

    def get_tiers(self, tenant_id: UUID, category_id: UUID) -> list[ProgressiveRate]:
        """Active tiers of a category, ascending by ``min_volume``."""
        rates = self.tariff_repo.get_active_rates(category_id, tenant_id)
        if not rates:
            raise NoTariffDefined(category_id)
        return rates

    def simulate_bill(
        self, tenant_id: UUID, category_id: UUID, volume: Decimal
    ) -> tuple[TariffCategory, TariffQuote]:
        """Preview the volumetric charge for ``volume`` m3 without persisting anything."""
        category = self.get_category(tenant_id, category_id)
        tiers = self.get_tiers(tenant_id, category_id)
        return category, tariff_engine.price(tiers, volume, category_id=category_id)

    def quote_for_subscription(
        self, tenant_id: UUID, subscription_type: Any, volume: Decimal
    ) -> TariffQuote:
        """Price usage with the tariff category attached to a customer's plan."""
        category_id = subscription_type.tariff_category_id
        if category_id is None:
            raise NoTariffDefined()
        tiers = self.get_tiers(tenant_id, category_id)
        return tariff_engine.price(tiers, volume, category_id=category_id)

    def add_rate(self, tenant_id: UUID, data: ProgressiveRateCreate) -> ProgressiveRate:
        """Append a tier to a category, keeping the schedule contiguous.

        The first tier starts at 0, each next tier starts where the previous
        bounded tier ends, and nothing may follow an unbounded tier.
        """
        self.get_category(tenant_id, data.category_id)
        existing = self.tariff_repo.get_active_rates(data.category_id, tenant_id)

        if not existing:
            if data.min_volume != 0:
                raise BusinessRuleError("The first tier must start at 0 m³")
        else:
            top = existing[-1]
            if top.max_volume is None:
                raise BusinessRuleError("Cannot add a tier after the unbounded top tier")
            if Decimal(str(top.max_volume)) != data.min_volume:
                raise BusinessRuleError(
                    f"Tier must start at {top.max_volume} m³ to stay contiguous"
                )

        return self.tariff_repo.create_rate(data, tenant_id)
