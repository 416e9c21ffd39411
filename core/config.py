"""
Configuration management using Pydantic Settings.
Follows Single Responsibility Principle - only handles configuration.
"""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = Field(default="Todo & Catalog API", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")

    # API Service
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=7000, alias="PORT")
    # Comma-separated list, "*" allows any origin
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    # MongoDB Settings
    db_url: str = Field(default="mongodb://localhost:27017", alias="DB")
    todo_db_name: str = Field(default="todo_db", alias="TODO_DB_NAME")
    todo_collection_name: str = Field(default="todos", alias="TODO_COLLECTION_NAME")
    catalog_db_name: str = Field(default="catalog_db", alias="CATALOG_DB_NAME")
    catalog_collection_name: str = Field(
        default="projects", alias="CATALOG_COLLECTION_NAME"
    )
    mongodb_server_selection_timeout_ms: int = Field(
        default=5000, alias="MONGODB_SERVER_SELECTION_TIMEOUT_MS"
    )
    mongodb_connect_timeout_ms: int = Field(
        default=10000, alias="MONGODB_CONNECT_TIMEOUT_MS"
    )

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_dir: str = Field(default="logs", alias="LOG_DIR")

    @property
    def cors_origin_list(self) -> List[str]:
        """CORS origins split from the comma-separated setting."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def masked_db_url(self) -> str:
        """Connection URL with the password replaced, safe for logging."""
        if "@" not in self.db_url or "://" not in self.db_url:
            return self.db_url

        credentials, host = self.db_url.rsplit("@", 1)
        protocol, user_info = credentials.split("://", 1)
        if ":" in user_info:
            user = user_info.split(":", 1)[0]
            return f"{protocol}://{user}:****@{host}"
        return self.db_url


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Using lru_cache to ensure single instance (Singleton pattern).
    """
    return Settings()
