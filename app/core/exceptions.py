from typing import Iterable


class BaseServiceError(Exception):
    """Base exception for all service-related errors."""
    pass

class RateServiceError(BaseServiceError):
    """Base exception for shipping rate service errors."""
    pass

class RateValidationError(RateServiceError):
    """Raised when a rate request is rejected before pricing runs."""

    error_type = "ValidationError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

class MissingFieldError(RateValidationError):
    """Raised when a required route field is absent or empty."""

    error_type = "MissingField"

    def __init__(self, missing_fields: Iterable[str]):
        self.missing_fields = list(missing_fields)
        super().__init__(
            "Collection and delivery countries are required "
            f"(missing: {', '.join(self.missing_fields)})"
        )

class InvalidWeightError(RateValidationError):
    """Raised when the parsed weight is not a positive, finite number."""

    error_type = "InvalidWeight"

    def __init__(self, weight: float, message: str = "Weight must be greater than 0"):
        self.weight = weight
        super().__init__(message)
