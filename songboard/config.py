# ============================================================================
# FILE: songboard/config.py
# ============================================================================
from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    """Application configuration using Pydantic BaseSettings"""

    # App settings
    APP_NAME: str = "Songboard"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./songboard.db"

    # Legacy single-document store imported on first start (users/sessions/songs/likes)
    SEED_FILE: Optional[str] = None

    # Redis cache
    REDIS_URL: str = "redis://localhost:6379/0"
    CACHE_EXPIRE_SECONDS: int = 3600

    # Session cookie
    SESSION_COOKIE_NAME: str = "session"
    SESSION_COOKIE_SECURE: bool = False

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:8000"]

    # Genres offered at submission time
    GENRE_OPTIONS: List[str] = [
        "Ballad",
        "Dance",
        "Hip-hop",
        "R&B / Soul",
        "Rock / Metal",
        "Indie",
        "POP",
        "J-POP",
        "Other",
    ]

    # Recommendations
    RECOMMENDATION_LIMIT: int = 20
    TOP_GENRE_COUNT: int = 2

    # Built single-page frontend
    FRONTEND_DIR: str = "frontend/dist"

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
