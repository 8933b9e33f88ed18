"""
Rate Engine

Simulated multi-carrier pricing. Generates shipping quotes for a route and
weight without calling any carrier API.

Pricing, per carrier:
- start from the carrier's base price
- international routes (origin != destination) apply the international multiplier
- every kg above the free allowance (5 kg) adds weight_multiplier
- a random jitter factor in [0.9, 1.1] is applied, then rounded to 2 dp

Countries are opaque strings compared by exact equality: "UK", "uk" and
"United Kingdom" are three different countries as far as pricing goes.

Usage:
    engine = RateEngine()
    quotes = engine.calculate_rates("UK", "US", 10)

    # Deterministic pricing for tests
    engine = RateEngine(jitter=fixed_jitter(1.0))
"""

import logging
import random
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Callable, List, Optional, Sequence

from app.core.enums import ServiceType
from app.schemas.shipping import RateQuote
from app.services.shipping.base import CarrierProfile
from app.services.shipping.data import DEFAULT_CARRIERS
from app.services.shipping.factory import carrier_names

logger = logging.getLogger(__name__)

FREE_WEIGHT_ALLOWANCE_KG = 5
JITTER_MIN = 0.9
JITTER_MAX = 1.1

JitterSource = Callable[[], float]

# SystemRandom reads from the OS, so there is no seed state shared between requests
_system_random = random.SystemRandom()


def uniform_jitter() -> float:
    """Production jitter source: uniform draw from [JITTER_MIN, JITTER_MAX]"""
    return _system_random.uniform(JITTER_MIN, JITTER_MAX)


def fixed_jitter(value: float = 1.0) -> JitterSource:
    """Build a jitter source that always returns the same factor"""
    def _jitter() -> float:
        return value
    return _jitter


def is_international(origin_country: str, destination_country: str) -> bool:
    return origin_country != destination_country


def pre_jitter_price(carrier: CarrierProfile, international: bool, weight: float) -> float:
    """Carrier price for a route and weight before jitter and rounding"""
    price = carrier.base_price

    if international:
        price *= carrier.international_multiplier

    if weight > FREE_WEIGHT_ALLOWANCE_KG:
        price += (weight - FREE_WEIGHT_ALLOWANCE_KG) * carrier.weight_multiplier

    return price


def round_price(value: float) -> float:
    """Round to 2 decimal places, halves away from zero"""
    # Enough precision for any finite float at 2 dp (the default context stops at 28 digits)
    with localcontext() as ctx:
        ctx.prec = 400
        return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def format_transit(days: int, international: bool) -> str:
    """
    Human readable transit estimate

    Examples:
        format_transit(1, False) -> "1 business day"
        format_transit(2, False) -> "2 business days"
        format_transit(3, True)  -> "3-5 business days"
    """
    if international:
        return f"{days}-{days + 2} business days"
    return f"{days} business day{'s' if days > 1 else ''}"


class RateEngine:
    """Prices a route and weight against every configured carrier"""

    def __init__(
        self,
        carriers: Sequence[CarrierProfile] = DEFAULT_CARRIERS,
        jitter: Optional[JitterSource] = None,
    ):
        names = carrier_names(carriers)
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate carrier names: {', '.join(duplicates)}")

        self.carriers = tuple(carriers)
        self.jitter = jitter or uniform_jitter

    def quote_carrier(self, carrier: CarrierProfile, international: bool, weight: float) -> RateQuote:
        price = pre_jitter_price(carrier, international, weight) * self.jitter()
        estimated_days = carrier.transit_days.for_route(international)

        return RateQuote(
            carrier=carrier.name,
            service=ServiceType.for_route(international).value,
            price=round_price(price),
            transit=format_transit(estimated_days, international),
            estimated_days=estimated_days,
        )

    def calculate_rates(self, origin_country: str, destination_country: str, weight: float) -> List[RateQuote]:
        """
        Quote every carrier for the route, cheapest first

        Args:
            origin_country: Collection country, compared verbatim
            destination_country: Delivery country, compared verbatim
            weight: Shipment weight in kg, must be > 0 (enforced by the caller)

        Returns:
            One quote per carrier sorted ascending by price; ties keep
            carrier table order
        """
        international = is_international(origin_country, destination_country)

        quotes = [
            self.quote_carrier(carrier, international, weight)
            for carrier in self.carriers
        ]

        logger.debug(
            f"Priced {len(quotes)} carriers for {origin_country} -> {destination_country} "
            f"({weight}kg, international={international})"
        )

        # sorted() is stable, so equal prices stay in carrier table order
        return sorted(quotes, key=lambda quote: quote.price)


def calculate_shipping_rates(
    collection_country: str,
    delivery_country: str,
    weight: float,
    carriers: Sequence[CarrierProfile] = DEFAULT_CARRIERS,
    jitter: Optional[JitterSource] = None,
) -> List[RateQuote]:
    """Functional entry point for RateEngine.calculate_rates"""
    return RateEngine(carriers, jitter).calculate_rates(collection_country, delivery_country, weight)
