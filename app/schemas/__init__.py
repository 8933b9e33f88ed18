"""
Schema exports for the application.
"""

# Base schemas
from .base import BaseSchema

# Shipping rate schemas
from .shipping import RateRequest, RateQuote, RateResponse, ErrorResponse

# Health / service info
from .health import HealthFeatures, HealthStatus, ServiceInfo
