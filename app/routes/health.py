from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from app.core.config import Settings, get_settings
from app.schemas.health import HealthFeatures, HealthStatus

router = APIRouter(prefix="/api", tags=["health"])

@router.get("/health", response_model=HealthStatus)
async def health_check(settings: Settings = Depends(get_settings)):
    """Static capability descriptor for the dashboard"""
    return HealthStatus(
        status="ok",
        service=settings.APP_NAME,
        version=settings.APP_VERSION,
        timestamp=datetime.now(timezone.utc),
        features=HealthFeatures(
            rate_calculation="enabled",
            mock_data=settings.MOCK_DATA,
        ),
    )
