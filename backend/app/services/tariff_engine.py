"""Progressive (tiered) water tariff pricing.

Pure functions only: the same ``price`` call backs both the bill simulator
and monthly invoice generation, so both produce identical figures for the
same tiers and volume.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from app.core.errors import NoTariffDefined, ValidationError

CENT = Decimal("0.01")


@dataclass(frozen=True)
class Tier:
    min_volume: Decimal
    max_volume: Decimal | None
    price_per_unit: Decimal


@dataclass(frozen=True)
class TierCharge:
    tier_range: str
    volume: Decimal
    price_per_unit: Decimal
    amount: Decimal


@dataclass(frozen=True)
class TariffQuote:
    volume: Decimal
    total_amount: Decimal
    breakdown: list[TierCharge] = field(default_factory=list)

    @property
    def average_price(self) -> Decimal:
        """Average price per m3, zero when nothing was consumed."""
        if self.volume <= 0:
            return Decimal("0")
        return (self.total_amount / self.volume).quantize(CENT, rounding=ROUND_HALF_UP)


def has_sub_cent_digits(value: Decimal) -> bool:
    """True when ``value`` has non-zero digits below 0.01."""
    exponent = value.normalize().as_tuple().exponent
    return isinstance(exponent, int) and exponent < -2


def _to_decimal(value: Any) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _format_volume(value: Decimal) -> str:
    return format(value.normalize(), "f")


def to_tier(rate: Any) -> Tier:
    """Build a Tier from anything exposing the tier attributes (e.g. a ProgressiveRate row)."""
    max_volume = rate.max_volume
    return Tier(
        min_volume=_to_decimal(rate.min_volume),
        max_volume=None if max_volume is None else _to_decimal(max_volume),
        price_per_unit=_to_decimal(rate.price_per_unit),
    )


def tier_range_label(tier: Tier) -> str:
    if tier.max_volume is None:
        return f"{_format_volume(tier.min_volume)} - unlimited m³"
    return f"{_format_volume(tier.min_volume)} - {_format_volume(tier.max_volume)} m³"


def price(tiers: Sequence[Any], volume: Decimal, category_id: Any = None) -> TariffQuote:
    """Price ``volume`` m3 against a tier schedule.

    Tiers must already be sorted ascending by ``min_volume``. Each tier
    consumes at most its width (``max_volume - min_volume``, or everything
    left for the unbounded tier); a malformed tier with a non-positive width
    is skipped. Volume beyond the last bounded tier is not billed.

    Args:
        tiers: ProgressiveRate rows or ``Tier`` values.
        volume: Consumed volume in m3.
        category_id: Only used to label a ``NoTariffDefined`` error.

    Returns:
        A TariffQuote whose breakdown volumes and amounts add up to the
        billed volume and ``total_amount``.

    Raises:
        NoTariffDefined: If ``tiers`` is empty.
        ValidationError: If ``volume`` is negative.
    """
    if not tiers:
        raise NoTariffDefined(category_id)

    volume = _to_decimal(volume)
    if volume < 0:
        raise ValidationError("Usage volume cannot be negative")

    total = Decimal("0")
    remaining = volume
    breakdown: list[TierCharge] = []

    for tier in (to_tier(t) for t in tiers):
        if remaining <= 0:
            break

        capacity = remaining if tier.max_volume is None else tier.max_volume - tier.min_volume
        units_in_tier = min(remaining, capacity)
        if units_in_tier <= 0:
            continue

        amount = (units_in_tier * tier.price_per_unit).quantize(CENT, rounding=ROUND_HALF_UP)
        total += amount
        breakdown.append(
            TierCharge(
                tier_range=tier_range_label(tier),
                volume=units_in_tier,
                price_per_unit=tier.price_per_unit,
                amount=amount,
            )
        )
        remaining -= units_in_tier

    return TariffQuote(volume=volume, total_amount=total, breakdown=breakdown)
