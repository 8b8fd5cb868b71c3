# wishlist/config.py
from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from pathlib import Path
from functools import lru_cache
from typing import List, Optional


class Settings(BaseSettings):
    ENV: str = "development"
    APP_NAME: str = "Wishlist Service API"
    APP_VERSION: str = "1.0.0"

    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # "mongo" for the document store, "file" for the local CSV-backed table
    STORAGE_BACKEND: str = "mongo"

    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DATABASE: str = "wishlist_db"
    MONGO_COLLECTION: str = "wishlists"
    MONGO_SERVER_SELECTION_TIMEOUT_MS: int = 5000

    DATA_DIR: Path = Path("data")  # only used by the file backend
    WISHLISTS_FILE: str = "wishlists.csv"

    CORS_ORIGINS: str = "http://localhost:3000"

    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Example .env:
    # STORAGE_BACKEND=file
    # DATA_DIR=./data

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()

settings = get_settings()
