"""Client settings loaded from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # High Systems instance and credentials
    # HS_INSTANCE=demo targets demo.highsystems.io
    instance: str = ""
    user_token: str = ""
    temp_token: str = ""  # takes precedence over user_token
    user_agent: str = ""

    # Throttling
    connection_limit: int = 10
    connection_limit_period: int = 1000  # milliseconds
    error_on_connection_limit: bool = False

    # Proxy (disabled when host is empty)
    proxy_host: str = ""
    proxy_port: int = 0
    proxy_username: str = ""
    proxy_password: str = ""

    # Logging
    log_level: str = "WARNING"
    log_file: str = ""  # Empty = stdout only

    model_config = {"env_prefix": "HS_", "env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
