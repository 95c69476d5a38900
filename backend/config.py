"""Backend configuration."""
from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Data paths
    project_root: Path = Path(__file__).parent.parent
    data_dir: Path = project_root / "data"
    snapshot_dir: Path = data_dir / "snapshots"

    # API settings
    api_title: str = "Swell Recap API"
    api_version: str = "1.0.0"
    cors_origins: list = ["http://localhost:5173", "http://localhost:3000"]
    log_level: str = "INFO"

    # Upstream forecast sources (Open-Meteo)
    marine_base_url: str = "https://marine-api.open-meteo.com/v1/marine"
    forecast_base_url: str = "https://api.open-meteo.com/v1/forecast"
    request_timeout: float = 30.0
    forecast_cache_ttl_seconds: float = 600.0
    forecast_cache_size: int = 256

    # Snapshot keys round coordinates to this many decimals
    coordinate_decimals: int = 3
    # Days fetched either side of a target date so midnight tides are seen
    tide_padding_days: int = 1
    # History returns center date +/- this many days
    history_radius_days: int = 1

    class Config:
        env_prefix = "SWELL_RECAP_"


settings = Settings()
