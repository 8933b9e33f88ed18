"""
Schemas for the shipping rate endpoint.

The request body itself is accepted as a loose JSON object and turned into a
RateRequest by RateService.validate(), so that missing fields and unparseable
weights produce the envelope errors clients expect instead of a 422.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import Field

from app.schemas.base import BaseSchema


class RateRequest(BaseSchema):
    """A validated rate request, consumed once by the rate engine"""
    collection_country: str
    delivery_country: str
    weight: float
    collection_postcode: Optional[str] = None
    delivery_postcode: Optional[str] = None

    @property
    def route(self) -> str:
        return f"{self.collection_country} → {self.delivery_country}"


class RateQuote(BaseSchema):
    """One carrier's quote for a route and weight"""
    carrier: str
    service: str
    price: float
    transit: str
    estimated_days: int = Field(alias="estimatedDays")


class RateResponse(BaseSchema):
    success: bool = True
    rates: List[RateQuote]
    route: str
    weight: float
    timestamp: datetime


class ErrorResponse(BaseSchema):
    success: bool = False
    error: str
    message: Optional[str] = None
