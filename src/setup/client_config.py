from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class ClientSettings(BaseSettings):
    """Configuration for the task API client."""
    API_BASE_URL: str = "http://localhost:4000/api"
    REQUEST_TIMEOUT_SECONDS: float = 10.0

    model_config = ConfigDict(env_file=".env", extra="ignore")


def get_client_settings() -> ClientSettings:
    """Return a fresh client settings instance."""
    return ClientSettings()
