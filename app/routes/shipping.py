import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from app.core.exceptions import RateValidationError
from app.dependencies import get_rate_service
from app.schemas.shipping import ErrorResponse, RateResponse
from app.services.shipping.service import RateService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["shipping"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid rate request"},
        500: {"model": ErrorResponse, "description": "Rate calculation failed"},
    },
)


@router.post("/shipping-rates", response_model=RateResponse)
async def calculate_shipping_rates_endpoint(
    payload: Optional[Dict[str, Any]] = Body(None),
    rate_service: RateService = Depends(get_rate_service),
):
    """Calculate shipping rates for a route and weight across all carriers."""
    try:
        return await rate_service.get_rates(payload or {})

    except RateValidationError as e:
        logger.info(f"Rejected rate request ({e.error_type}): {e.message}")
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error=e.message).model_dump(exclude_none=True),
        )

    except Exception as e:
        logger.exception("Error calculating rates")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="Failed to calculate shipping rates",
                message=str(e),
            ).model_dump(),
        )
