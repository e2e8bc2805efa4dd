# Standard library imports
import os
from typing import Final, List, Optional


def _get_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.database_url: Final[str] = os.getenv("DATABASE_URL", "sqlite:///./face_detection.db")
        self.database_echo: Final[bool] = _get_bool("DATABASE_ECHO", "false")

        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "10080")
        )

        # HTTP Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "8000"))
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv(
                "CORS_ORIGINS", "http://localhost:5173,http://localhost:3000"
            ).split(",")
            if origin.strip()
        ]
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # Processing worker (face detection runs out of process)
        self.processing_worker_url: Final[str] = os.getenv("PROCESSING_WORKER_URL", "").rstrip("/")
        self.processing_worker_timeout: Final[float] = float(
            os.getenv("PROCESSING_WORKER_TIMEOUT", "10")
        )

        # Real-time channel
        self.system_stats_interval_seconds: Final[float] = float(
            os.getenv("SYSTEM_STATS_INTERVAL_SECONDS", "30")
        )

        # Seeding
        self.admin_username: Final[str] = os.getenv("ADMIN_USERNAME", "admin")
        self.admin_password: Final[str] = os.getenv("ADMIN_PASSWORD", "secret")


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
