#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Configuration module for the pachca-tags CLI tool.

Settings are read from the environment (optionally populated from a .env
file) into an explicit ClientConfig value that is handed to the API client.
"""

import os
from typing import Dict, List, Mapping, Optional

from pydantic import BaseModel, field_validator

from pachca_tags.exceptions import ConfigError

DEFAULT_API_URL = "https://api.pachca.com/api/shared/v1"

# Required environment variables
REQUIRED_ENV_VARS = {
    "PACHCA_ADMIN_TOKEN": "Admin access token for the Pachca API",
}

OPTIONAL_ENV_VARS = {
    "PACHCA_API_URL": f"Base URL of the Pachca API (default: {DEFAULT_API_URL})",
}


class ClientConfig(BaseModel):
    """Connection settings for the Pachca API."""

    api_url: str = DEFAULT_API_URL
    admin_token: str

    @field_validator("api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/") or DEFAULT_API_URL

    @field_validator("admin_token")
    @classmethod
    def _require_token(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("admin token must not be blank")
        return value


def missing_env_vars(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """Return descriptions of required variables that are unset or blank."""
    environ = os.environ if environ is None else environ
    missing = []
    for var, desc in REQUIRED_ENV_VARS.items():
        if not (environ.get(var) or "").strip():
            missing.append(f"{var} - {desc}")
    return missing


def load_config(environ: Optional[Mapping[str, str]] = None) -> ClientConfig:
    """Build a ClientConfig from the environment.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        The validated configuration

    Raises:
        ConfigError: If a required variable is missing or blank
    """
    environ = os.environ if environ is None else environ
    missing = missing_env_vars(environ)
    if missing:
        raise ConfigError("Missing required environment variables: " + ", ".join(missing))

    values: Dict[str, str] = {"admin_token": environ["PACHCA_ADMIN_TOKEN"]}
    if environ.get("PACHCA_API_URL"):
        values["api_url"] = environ["PACHCA_API_URL"]
    return ClientConfig(**values)
