"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Fetching
    fetch_timeout: float = 20.0
    user_agent: str = "Mozilla/5.0 (compatible; kinoprogram/0.1)"
    snippet_length: int = 200

    # Extraction
    max_json_depth: int = 64

    # Edge cache for successful program responses
    cache_s_maxage: int = 300
    cache_stale_while_revalidate: int = 600

    # API settings
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:5174",
    ]
    log_level: str = "INFO"
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    @property
    def cache_control(self) -> str:
        return (
            f"s-maxage={self.cache_s_maxage}, "
            f"stale-while-revalidate={self.cache_stale_while_revalidate}"
        )


# Global settings instance
settings = Settings()
