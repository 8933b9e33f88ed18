"""
Core module exports.
"""
from .enums import ServiceType

from .exceptions import (
    BaseServiceError,
    RateServiceError,
    RateValidationError,
    MissingFieldError,
    InvalidWeightError,
)
