"""Client configuration via environment variables."""

from typing import Optional

from pydantic_settings import BaseSettings

from gocardless_client.models.enums import Environment

BASE_URLS = {
    Environment.LIVE: "https://api.gocardless.com",
    Environment.SANDBOX: "https://api-sandbox.gocardless.com",
}


class Settings(BaseSettings):
    access_token: str = ""
    environment: Environment = Environment.SANDBOX
    base_url: Optional[str] = None  # Overrides the environment's URL
    api_version: str = "2015-07-06"
    timeout_seconds: float = 30.0
    max_retries: int = 3
    retry_delay_seconds: float = 0.5
    max_retry_delay_seconds: float = 5.0
    raise_on_idempotency_conflict: bool = False
    webhook_secret: str = ""
    log_level: str = "INFO"

    model_config = {"env_prefix": "GOCARDLESS_", "env_file": ".env", "env_file_encoding": "utf-8"}

    def resolved_base_url(self) -> str:
        return (self.base_url or BASE_URLS[self.environment]).rstrip("/")


settings = Settings()
