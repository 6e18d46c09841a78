"""Configuration management for the Biblia API."""
import os
from urllib.parse import urlparse
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # API Configuration
    app_name: str = Field(default="API Biblia Católica", env="APP_NAME")
    debug: bool = Field(default=False, env="DEBUG")

    # Database Configuration (hosted Postgres compatible)
    database_url: str = Field(default="", env="DATABASE_URL")
    db_name: str = Field(default="", env="DB_NAME")
    db_user: str = Field(default="", env="DB_USER")
    db_password: str = Field(default="", env="DB_PASSWORD")
    db_host: str = Field(default="localhost", env="DB_HOST")
    db_port: int = Field(default=5432, env="DB_PORT")
    db_sslmode: str = Field(default="", env="DB_SSLMODE")
    db_pool_min: int = Field(default=1, env="DB_POOL_MIN")
    db_pool_max: int = Field(default=10, env="DB_POOL_MAX")
    db_pool_timeout: float = Field(default=30.0, env="DB_POOL_TIMEOUT")

    # Search Configuration
    search_default_limit: int = Field(default=20, env="SEARCH_DEFAULT_LIMIT")
    search_max_limit: int = Field(default=200, env="SEARCH_MAX_LIMIT")

    # Loader Configuration
    bible_data_file: str = Field(default="json/biblia_jerusalen_1976.json", env="BIBLE_DATA_FILE")

    # CORS Configuration
    @computed_field
    @property
    def allowed_origins(self) -> list[str]:
        """Parse allowed origins from environment variable; defaults to any origin."""
        allowed_origins_str = os.getenv("ALLOWED_ORIGINS", "*")
        return [origin.strip() for origin in allowed_origins_str.split(",") if origin.strip()]

    @property
    def db_config(self) -> dict:
        """Get database configuration, preferring DATABASE_URL."""
        if self.database_url and self.database_url.strip():
            parsed = urlparse(self.database_url)
            config = {
                'dbname': parsed.path[1:],  # Remove leading slash
                'user': parsed.username,
                'password': parsed.password,
                'host': parsed.hostname,
                'port': parsed.port or 5432
            }
        elif self.db_name.strip() and self.db_user.strip():
            config = {
                'dbname': self.db_name,
                'user': self.db_user,
                'password': self.db_password,
                'host': self.db_host,
                'port': self.db_port
            }
        else:
            # Fallback configuration for development
            config = {
                'dbname': 'biblia',
                'user': 'postgres',
                'password': 'postgres',
                'host': 'localhost',
                'port': 5432
            }

        if self.db_sslmode.strip():
            config['sslmode'] = self.db_sslmode.strip()
        return config

    model_config = SettingsConfigDict(
        env_file=None,  # Don't load from .env file
        case_sensitive=False,
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get settings instance."""
    return Settings()
