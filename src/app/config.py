"""Configuration management using Pydantic settings."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "MAPSTATE"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Initial view (lng, lat, zoom)
    map_center_lng: float = -93.0
    map_center_lat: float = 45.0
    map_zoom: float = 5.0

    # Bookmark walker
    bookmark_source: str = "points"
    bookmark_zoom: float = 5.0

    # Demo data
    random_points: int = 10
    random_seed: Optional[int] = None   # fixed seed gives a reproducible map
    cluster_radius: int = 50


settings = Settings()
