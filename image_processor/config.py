"""
Configuration for the image processor client.

Values come from the environment (or a local ``.env``) so the API key never
has to be passed on the command line.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_INFERENCE_URL = "https://detect.roboflow.com"
DEFAULT_WORKFLOW = "matt-palmer/remove-background"


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    roboflow_api_key: Optional[str] = None
    backend_url: str = "http://localhost:3000"
    inference_url: str = DEFAULT_INFERENCE_URL
    inference_workflow: str = DEFAULT_WORKFLOW
    inference_timeout: float = 60.0
    log_level: str = "INFO"


@lru_cache()
def get_client_settings() -> ClientSettings:
    """Return cached settings to avoid reparsing env on every call."""
    return ClientSettings()
