"""
Configuration model for the guide linker.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .content.client import DEFAULT_TIMEOUT, DOFUSDB_API_BASE, MAX_RETRIES, RETRY_BACKOFF
from .slugs.urls import GUIDE_BASE_URL, GUIDE_URL_SUFFIX

ENV_PREFIX = "DOFUS_LINKER_"


class LinkerConfig(BaseModel):
    """Settings for guide URL generation and the DofusDB lookup."""

    # Guide site
    base_url: str = Field(
        default=GUIDE_BASE_URL,
        description="Origin of the guide site, without trailing slash"
    )
    url_suffix: str = Field(
        default=GUIDE_URL_SUFFIX,
        description="Suffix appended to every guide slug"
    )

    # Content API
    api_base_url: str = Field(
        default=DOFUSDB_API_BASE,
        description="Origin of the DofusDB API"
    )
    request_timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0.0,
        description="Seconds before a DofusDB request times out"
    )
    max_retries: int = Field(
        default=MAX_RETRIES,
        ge=1,
        le=10,
        description="Attempts per DofusDB request"
    )
    retry_backoff: float = Field(
        default=RETRY_BACKOFF,
        ge=0.0,
        description="Base of the exponential wait between retries"
    )

    # Data overrides
    exceptions_path: Path | None = Field(
        default=None,
        description="YAML exception table replacing the bundled one"
    )
    selector_rules_path: Path | None = Field(
        default=None,
        description="YAML file overriding variant selector rules"
    )

    @field_validator("base_url", "api_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Ensure the URL is http(s) and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"URL must start with http:// or https://, got '{v}'")
        return v.rstrip("/")


def load_config() -> LinkerConfig:
    """Build a LinkerConfig from DOFUS_LINKER_* environment variables.

    A ``.env`` file in the working directory is loaded first when present.
    Unset variables keep the model defaults.

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value
    """
    load_dotenv()

    fields = {
        "base_url": "BASE_URL",
        "url_suffix": "URL_SUFFIX",
        "api_base_url": "API_BASE_URL",
        "request_timeout": "REQUEST_TIMEOUT",
        "max_retries": "MAX_RETRIES",
        "retry_backoff": "RETRY_BACKOFF",
        "exceptions_path": "EXCEPTIONS_PATH",
        "selector_rules_path": "SELECTOR_RULES_PATH",
    }
    values = {}
    for field_name, env_name in fields.items():
        value = os.getenv(ENV_PREFIX + env_name)
        if value:
            values[field_name] = value

    return LinkerConfig(**values)


__all__ = ["LinkerConfig", "load_config"]
