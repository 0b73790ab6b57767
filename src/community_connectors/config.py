"""Configuration management using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CONNECTORS_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    cors_origins: str = "*"

    # HTTP
    http_timeout_seconds: float = 30.0

    # GitHub
    github_graphql_url: str = "https://api.github.com/graphql"
    github_max_pages: int = 10
    github_page_size: int = 100
    github_token: str | None = None

    # Jira
    jira_max_results: int = 100
    jira_username: str | None = None
    jira_token: str | None = None

    # Check requested fields against the row rules before fetching
    strict_fields: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
