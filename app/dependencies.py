from functools import lru_cache

from fastapi import Depends

from app.services.shipping.rate_engine import RateEngine
from app.services.shipping.service import RateService


@lru_cache()
def get_rate_engine() -> RateEngine:
    """Dependency for the shared rate engine (read-only carrier table, OS-backed jitter)."""
    return RateEngine()


def get_rate_service(engine: RateEngine = Depends(get_rate_engine)) -> RateService:
    """Dependency for a per-request rate service."""
    return RateService(engine)
