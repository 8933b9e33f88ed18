"""
Shipping Rate Service

Entry point for rate requests coming in over HTTP or the CLI. Validates the
raw request body, runs the rate engine and shapes the response envelope.

Validation order (first failure wins):
1. collection_country and delivery_country must both be non-empty strings -> MissingFieldError
   (non-string values such as 5 count as missing rather than being coerced, so
   the route is classified on exactly the strings the client sent)
2. weight is parsed leniently; anything unparseable, zero or NaN becomes 1 kg
3. the parsed weight must be > 0 (and finite) -> InvalidWeightError

Usage:
    service = RateService(RateEngine())
    response = await service.get_rates({"collection_country": "UK", "delivery_country": "US", "weight": 10})
"""

import logging
import math
import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from app.core.exceptions import InvalidWeightError, MissingFieldError
from app.schemas.shipping import RateRequest, RateResponse
from app.services.shipping.rate_engine import RateEngine

logger = logging.getLogger(__name__)

DEFAULT_WEIGHT_KG = 1.0
REQUIRED_FIELDS = ("collection_country", "delivery_country")

# Leading decimal number, the part of a string a lenient parser would read ("12.5kg" -> 12.5)
_NUMERIC_PREFIX = re.compile(r"\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_weight(raw: Any) -> float:
    """
    Parse a weight the lenient way: fall back to DEFAULT_WEIGHT_KG instead of failing.

    Examples:
        parse_weight(10) -> 10.0
        parse_weight("12.5kg") -> 12.5
        parse_weight("abc") -> 1.0
        parse_weight(0) -> 1.0
        parse_weight("-5") -> -5.0   (rejected later by validation)
    """
    if raw is None or isinstance(raw, bool):
        return DEFAULT_WEIGHT_KG

    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            value = math.inf if raw > 0 else -math.inf
    elif isinstance(raw, str):
        match = _NUMERIC_PREFIX.match(raw)
        if not match:
            return DEFAULT_WEIGHT_KG
        value = float(match.group(0))
    else:
        return DEFAULT_WEIGHT_KG

    if math.isnan(value) or value == 0:
        return DEFAULT_WEIGHT_KG

    return value


def _is_present(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _optional_text(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


class RateService:
    """Validates rate requests and wraps engine output into response envelopes"""

    def __init__(self, engine: Optional[RateEngine] = None):
        self.engine = engine or RateEngine()

    def validate(self, payload: Dict[str, Any]) -> RateRequest:
        """
        Turn a raw request body into a RateRequest

        Raises:
            MissingFieldError: collection or delivery country missing, empty or not a string
            InvalidWeightError: weight parsed to a non-positive or infinite number
        """
        missing = [field for field in REQUIRED_FIELDS if not _is_present(payload.get(field))]
        if missing:
            raise MissingFieldError(missing)

        weight = parse_weight(payload.get("weight"))

        if weight <= 0:
            raise InvalidWeightError(weight)
        if math.isinf(weight):
            raise InvalidWeightError(weight, "Weight must be a finite number")

        return RateRequest(
            collection_country=payload["collection_country"],
            delivery_country=payload["delivery_country"],
            weight=weight,
            collection_postcode=_optional_text(payload.get("collection_postcode")),
            delivery_postcode=_optional_text(payload.get("delivery_postcode")),
        )

    async def get_rates(self, payload: Dict[str, Any]) -> RateResponse:
        """
        Validate the payload and quote every carrier for it

        Args:
            payload: Raw JSON request body

        Returns:
            Success envelope with quotes sorted cheapest first
        """
        request = self.validate(payload)

        logger.info(
            f"Rate request: from {request.collection_country} ({request.collection_postcode or 'N/A'}) "
            f"to {request.delivery_country} ({request.delivery_postcode or 'N/A'}), "
            f"weight {request.weight}kg"
        )

        rates = self.engine.calculate_rates(
            request.collection_country,
            request.delivery_country,
            request.weight,
        )

        return RateResponse(
            success=True,
            rates=rates,
            route=request.route,
            weight=request.weight,
            timestamp=datetime.now(timezone.utc),
        )
