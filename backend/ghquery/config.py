import sys
from functools import lru_cache
from typing import Optional

from loguru import logger
from pydantic import Field, HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # ignore unrelated env vars to avoid validation errors
    )

    github_base_url: HttpUrl = Field(
        default="https://api.github.com", alias="GITHUB_BASE_URL"
    )
    github_search_path: str = Field(
        default="/search/repositories", alias="GITHUB_SEARCH_PATH"
    )
    github_accept: str = Field(
        default="application/vnd.github+json", alias="GITHUB_ACCEPT"
    )
    github_user_agent: str = Field(default="gh-query", alias="GITHUB_USER_AGENT")
    # upper bound for the single outbound search call
    github_timeout_seconds: float = Field(default=20.0, alias="GITHUB_TIMEOUT_SECONDS")
    github_proxy: Optional[str] = Field(default=None, alias="GITHUB_PROXY")
    web_page_size: int = Field(default=50, alias="WEB_PAGE_SIZE", ge=1)
    listen_host: str = Field(default="0.0.0.0", alias="LISTEN_HOST")
    listen_port: int = Field(default=5000, alias="LISTEN_PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
