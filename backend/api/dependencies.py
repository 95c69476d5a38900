"""FastAPI dependencies for dependency injection."""
from functools import lru_cache

from cachetools import TTLCache

from backend.config import settings
from backend.data.forecast_client import ForecastClient
from backend.data.snapshot_repository import SnapshotRepository
from backend.services.recap_service import RecapService


@lru_cache()
def get_forecast_cache() -> TTLCache:
    """Get the process-wide cache of fetched hourly series."""
    return TTLCache(
        maxsize=settings.forecast_cache_size,
        ttl=settings.forecast_cache_ttl_seconds,
    )


@lru_cache()
def get_snapshot_repository() -> SnapshotRepository:
    """Get cached snapshot repository instance."""
    return SnapshotRepository()


def get_forecast_client() -> ForecastClient:
    """Get forecast client sharing the process cache."""
    return ForecastClient(cache=get_forecast_cache())


def get_recap_service() -> RecapService:
    """Get recap service instance."""
    return RecapService(
        forecast_client=get_forecast_client(),
        snapshot_repo=get_snapshot_repository(),
    )
