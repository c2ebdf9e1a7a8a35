"""Client configuration read from the environment."""

import os
from typing import Self

from pydantic import BaseModel, Field, field_validator

TRUTHY_VALUES = ("1", "true", "yes", "on")


class ClientSettings(BaseModel):
    """Connection settings for the default OpenSearch client."""

    host: str = "localhost"
    port: int = Field(default=9200, gt=0)
    region: str = "us-east-1"
    use_aws_auth: bool | None = None
    timeout: int = Field(default=60, gt=0)
    verify_connection: bool = False

    @field_validator("host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        """Reject empty hosts."""
        if not v.strip():
            raise ValueError("host must not be empty")
        return v.strip()

    @property
    def is_aws_domain(self) -> bool:
        """Whether the host is an Amazon OpenSearch Service domain."""
        return ".es.amazonaws.com" in self.host or ".es.amazonaws.com.cn" in self.host

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Self:
        """Build settings from ``OPENSEARCH_*`` and ``AWS_REGION`` variables.

        Unset variables keep the field defaults.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        if host := env.get("OPENSEARCH_HOST"):
            values["host"] = host
        if port := env.get("OPENSEARCH_PORT"):
            values["port"] = port
        if region := env.get("AWS_REGION"):
            values["region"] = region
        if timeout := env.get("OPENSEARCH_TIMEOUT"):
            values["timeout"] = timeout
        if use_aws_auth := env.get("OPENSEARCH_USE_AWS_AUTH"):
            values["use_aws_auth"] = use_aws_auth.lower() in TRUTHY_VALUES
        if verify := env.get("OPENSEARCH_VERIFY_CONNECTION"):
            values["verify_connection"] = verify.lower() in TRUTHY_VALUES

        return cls.model_validate(values)
