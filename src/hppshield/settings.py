import sys

from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven defaults for the filter and its logging."""

    model_config = SettingsConfigDict(env_prefix="HPPSHIELD_")

    log_level: str = "INFO"

    check_query: bool = True
    check_body: bool = False
    access_query: str = "url_search"
    access_body: str = "url_search"
    strict_decoding: bool = False


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Route loguru output to stderr at the configured level and unmute the package."""

    logger.remove()
    logger.add(sys.stderr, level=(level or settings.log_level).upper())
    logger.enable("hppshield")
