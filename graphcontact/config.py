import logging
from functools import lru_cache

from pydantic_settings import BaseSettings

from graphcontact.models.contacts import EmailPrecedence


class Settings(BaseSettings):
    host: str = "127.0.0.1"
    port: int = 9000
    log_level: str = "INFO"
    email_precedence: EmailPrecedence = EmailPrecedence.DIRECTORY_FIRST

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str | None = None) -> None:
    """Set the root log level, defaulting to the configured one."""
    level = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)
