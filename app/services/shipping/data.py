"""
Carrier table used by the rate engine
"""

from app.services.shipping.base import CarrierProfile, TransitDays


# Iteration order doubles as the tie-break order when two quotes round to the same price
DEFAULT_CARRIERS = (
    CarrierProfile(
        name="DHL Express",
        base_price=85,
        international_multiplier=1.2,
        weight_multiplier=0.5,
        transit_days=TransitDays(domestic=1, international=3),
    ),
    CarrierProfile(
        name="FedEx",
        base_price=75,
        international_multiplier=1.3,
        weight_multiplier=0.6,
        transit_days=TransitDays(domestic=2, international=4),
    ),
    CarrierProfile(
        name="UPS",
        base_price=80,
        international_multiplier=1.25,
        weight_multiplier=0.55,
        transit_days=TransitDays(domestic=2, international=5),
    ),
    CarrierProfile(
        name="Royal Mail",
        base_price=12,
        international_multiplier=1.5,
        weight_multiplier=0.3,
        transit_days=TransitDays(domestic=1, international=7),
    ),
    CarrierProfile(
        name="DPD",
        base_price=15,
        international_multiplier=1.4,
        weight_multiplier=0.4,
        transit_days=TransitDays(domestic=1, international=5),
    ),
    CarrierProfile(
        name="ParcelForce",
        base_price=20,
        international_multiplier=1.35,
        weight_multiplier=0.45,
        transit_days=TransitDays(domestic=1, international=6),
    ),
)
