"""
Carrier lookup helpers
"""
from typing import Sequence

from app.services.shipping.base import CarrierProfile
from app.services.shipping.data import DEFAULT_CARRIERS


def get_carrier(name: str, carriers: Sequence[CarrierProfile] = DEFAULT_CARRIERS) -> CarrierProfile:
    """
    Look up a carrier profile by its name

    Args:
        name: The carrier name, e.g. "FedEx"
        carriers: Carrier table to search (defaults to the built-in table)

    Returns:
        The matching carrier profile

    Raises:
        ValueError: If the carrier is not configured
    """
    for carrier in carriers:
        if carrier.name == name:
            return carrier

    raise ValueError(f"Carrier '{name}' is not supported")


def carrier_names(carriers: Sequence[CarrierProfile] = DEFAULT_CARRIERS) -> list:
    """Carrier names in table order"""
    return [carrier.name for carrier in carriers]
