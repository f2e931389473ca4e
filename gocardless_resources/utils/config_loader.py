"""
Configuration loader for the API fetcher.

Reads a YAML file when one is given, otherwise environment variables
(a local .env file is loaded first). Validated with Pydantic.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

ENVIRONMENT_URLS = {
    "live": "https://api.gocardless.com",
    "sandbox": "https://api-sandbox.gocardless.com",
}

_ENV_VARS = {
    "environment": "GOCARDLESS_ENVIRONMENT",
    "base_url": "GOCARDLESS_BASE_URL",
    "access_token": "GOCARDLESS_ACCESS_TOKEN",
    "api_version": "GOCARDLESS_API_VERSION",
    "timeout_seconds": "GOCARDLESS_TIMEOUT_SECONDS",
}


class ClientConfig(BaseModel):
    """Settings for fetching resources over HTTP"""

    environment: Literal["live", "sandbox"] = "sandbox"
    base_url: Optional[str] = None
    access_token: str = ""
    api_version: str = "2015-07-06"
    timeout_seconds: float = Field(default=20.0, gt=0)

    @property
    def resolved_base_url(self) -> str:
        return (self.base_url or ENVIRONMENT_URLS[self.environment]).rstrip("/")


def load_client_config(config_path: Optional[Path] = None) -> ClientConfig:
    """
    Load and validate fetcher configuration.

    Args:
        config_path: Optional YAML file. When omitted, GOCARDLESS_* environment
            variables are used.

    Returns:
        Validated ClientConfig object

    Raises:
        FileNotFoundError: If config_path is given but doesn't exist
        ValidationError: If the values don't match the schema
    """
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}
        source = str(config_path)
    else:
        load_dotenv()
        config_data = {
            name: os.environ[var] for name, var in _ENV_VARS.items() if os.environ.get(var)
        }
        source = "environment"

    try:
        config = ClientConfig(**config_data)
        logger.info("Loaded client config from %s (environment=%s)", source, config.environment)
        return config
    except ValidationError as e:
        logger.error(f"Client config validation failed: {e}")
        raise
