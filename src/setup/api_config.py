from typing import Literal

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class ApiSettings(BaseSettings):
    APP_NAME: str = "taskboard"
    APP_VERSION: str = "0.1.0"
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"
    STORAGE_BACKEND: Literal["memory", "sql"] = "memory"

    model_config = ConfigDict(env_file=".env", extra="ignore")


def get_api_settings() -> ApiSettings:
    return ApiSettings()  # type: ignore[call-arg]
