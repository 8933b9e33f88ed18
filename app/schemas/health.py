"""
Schemas for the health and service-info endpoints.
"""

from datetime import datetime
from typing import Dict
from pydantic import Field

from app.schemas.base import BaseSchema


class HealthFeatures(BaseSchema):
    rate_calculation: str = Field(default="enabled", alias="rateCalculation")
    mock_data: bool = Field(default=True, alias="mockData")


class HealthStatus(BaseSchema):
    status: str = "ok"
    service: str
    version: str
    timestamp: datetime
    features: HealthFeatures


class ServiceInfo(BaseSchema):
    message: str
    version: str
    endpoints: Dict[str, str]
