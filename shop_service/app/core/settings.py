"""
Shop Service configuration using shared patterns
"""

from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

# Get the shop service directory path
SHOP_SERVICE_DIR = Path(__file__).parent.parent.parent
# Load from shop_service/.env
ENV_FILE = SHOP_SERVICE_DIR / ".env"


class ShopServiceSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra fields from .env file
    )

    # Application
    APP_NAME: str = "Shop Service"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Service specific
    SERVICE_NAME: str = "shop-service"

    # Database
    SHOP_DATABASE_URL: str = "sqlite+aiosqlite:///./shop.db"
    TEST_DATABASE_URL: str = "sqlite+aiosqlite:///./test.db"
    DATABASE_POOL_SIZE: int = 20
    DATABASE_MAX_OVERFLOW: int = 40

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]
    CORS_CREDENTIALS: bool = True
    CORS_METHODS: List[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    CORS_HEADERS: List[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"
    ENABLE_FILE_LOGGING: bool = False

    # Sample data inserted on startup
    SEED_SAMPLE_DATA: bool = False

    # Order queries
    ORDER_SEARCH_LIMIT: int = 1000
    DEFAULT_PAGE_LIMIT: int = 100


# Create a singleton instance
_settings_instance = None


def get_settings() -> ShopServiceSettings:
    """Get settings singleton instance"""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = ShopServiceSettings()
    return _settings_instance
