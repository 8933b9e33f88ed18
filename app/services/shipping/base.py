"""
Carrier Profiles

This module defines the static pricing and transit parameters for one
simulated shipping carrier.

A profile is frozen once built: the carrier table is created at import and
shared read-only by every request, so nothing may mutate it afterwards.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TransitDays:
    """Business days to delivery for each route class"""
    domestic: int
    international: int

    def __post_init__(self):
        if self.domestic < 1 or self.international < 1:
            raise ValueError(
                f"Transit days must be at least 1, got "
                f"domestic={self.domestic}, international={self.international}"
            )

    def for_route(self, international: bool) -> int:
        return self.international if international else self.domestic


@dataclass(frozen=True)
class CarrierProfile:
    """Pricing and transit parameters for a single carrier

    Attributes:
        name: Unique carrier name, shown on every quote
        base_price: Price covering the first 5 kg of a domestic shipment
        international_multiplier: Applied to the base price when origin != destination
        weight_multiplier: Currency per kg charged above the free allowance
        transit_days: Domestic / international delivery estimates
    """
    name: str
    base_price: float
    international_multiplier: float
    weight_multiplier: float
    transit_days: TransitDays

    def __post_init__(self):
        if not self.name:
            raise ValueError("Carrier name is required")
        if self.base_price < 0:
            raise ValueError(f"{self.name}: base_price must be non-negative")
        if self.international_multiplier < 1:
            raise ValueError(f"{self.name}: international_multiplier must be >= 1")
        if self.weight_multiplier < 0:
            raise ValueError(f"{self.name}: weight_multiplier must be non-negative")
