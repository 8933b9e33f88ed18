"""
Shared enums and constants used across the application.
"""

from enum import Enum

class ServiceType(str, Enum):
    """Service label attached to every quote, derived from the route"""
    DOMESTIC = "Domestic Express"
    INTERNATIONAL = "International Express"

    @classmethod
    def for_route(cls, international: bool) -> "ServiceType":
        return cls.INTERNATIONAL if international else cls.DOMESTIC
