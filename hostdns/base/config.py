"""
Pydantic configuration models.

Validates the registration request once at startup instead of
discovering bad values halfway through a run.
"""

from __future__ import annotations

import os
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from hostdns.base.exceptions import ConfigurationError


class AWSConfig(BaseModel):
    """Configuration for the AWS clients.

    Credentials are resolved in order:
    1. Explicit values passed in the config dict.
    2. Environment variables (AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY, AWS_DEFAULT_REGION).
    3. If neither is set, fields are left as None so boto3 can fall back to its
       own credential chain (instance profile, ~/.aws/credentials, etc.).
    """

    model_config = ConfigDict(extra="forbid")

    aws_access_key_id: str | None = Field(default=None, description="AWS access key ID")
    aws_secret_access_key: str | None = Field(default=None, description="AWS secret access key")
    region_name: str | None = Field(default=None, description="AWS region (e.g. 'us-east-1')")

    @model_validator(mode="before")
    @classmethod
    def resolve_from_env(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Fall back to environment variables for missing credentials."""
        env_map = {
            "aws_access_key_id": "AWS_ACCESS_KEY_ID",
            "aws_secret_access_key": "AWS_SECRET_ACCESS_KEY",
            "region_name": "AWS_DEFAULT_REGION",
        }
        for field, env_var in env_map.items():
            if not values.get(field):
                values[field] = os.environ.get(env_var)
        return values


class RegistrationConfig(BaseModel):
    """Everything one registration run needs.

    ``ttl``, ``weight`` and the retry fields have fixed defaults and are
    not exposed on the command line; tests override them.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    hostname: str = Field(description="Name for the new DNS entry")
    zone_name: str | None = Field(default=None, description="Hosted zone name")
    zone_id: str | None = Field(default=None, description="Hosted zone id, skips name lookup")
    cname: bool = Field(default=False, description="Publish a CNAME to the public hostname")
    debug: bool = Field(default=False, description="Verbose DNS API request logging")

    ttl: int = Field(default=0, ge=0)
    weight: int = Field(default=1, ge=0)
    retry_step: float = Field(default=2.0, ge=0)
    max_retry_steps: int = Field(default=4, ge=0)

    metadata_url: str = "http://169.254.169.254/latest"
    metadata_timeout: float | None = None

    aws: AWSConfig = Field(default_factory=AWSConfig)

    @field_validator("hostname", "zone_name", "zone_id", mode="before")
    @classmethod
    def strip_blank(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
        return value

    @model_validator(mode="after")
    def require_host_and_zone(self) -> RegistrationConfig:
        """Hostname is mandatory, and a zone must be named one way or the other."""
        if not self.hostname:
            raise ValueError("hostname is required: it names the record to register")
        if not self.zone_name and not self.zone_id:
            raise ValueError("zonename is required (or zoneId): it specifies the zone the record is added to")
        return self

    @property
    def record_type(self) -> str:
        return "CNAME" if self.cname else "A"

    @property
    def metadata_key(self) -> str:
        return "public-hostname" if self.cname else "local-ipv4"


def validate_config(config: dict) -> RegistrationConfig:
    """Validate and return a typed registration config.

    Args:
        config: Raw configuration dictionary (CLI values plus overrides).

    Returns:
        A validated, frozen :class:`RegistrationConfig`.

    Raises:
        ConfigurationError: If required values are missing or malformed.
    """
    try:
        return RegistrationConfig(**config)
    except ValidationError as e:
        messages = "; ".join(err["msg"] for err in e.errors())
        raise ConfigurationError(messages) from e


__all__ = [
    "AWSConfig",
    "RegistrationConfig",
    "validate_config",
]
