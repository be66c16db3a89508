"""Client configuration.

Environment variables (all optional):
    FUEL_GRAPHQL_ENDPOINT   GraphQL endpoint of a Fuel node.
                            Default: https://testnet.fuel.network/v1/graphql
    FUEL_GRAPHQL_TIMEOUT    Request timeout in seconds. Default: 30
"""

import os
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ENDPOINT = "https://testnet.fuel.network/v1/graphql"


class ClientConfig(BaseModel):
    """Settings for :class:`fuel_gql.client.FuelClient`."""

    model_config = ConfigDict(frozen=True)

    endpoint: str = Field(DEFAULT_ENDPOINT, description="GraphQL endpoint URL")
    timeout: float = Field(30.0, gt=0, description="Request timeout in seconds")
    headers: dict[str, str] = Field(default_factory=dict, description="Extra request headers")

    @field_validator("endpoint")
    @classmethod
    def _check_endpoint(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"endpoint must be an http(s) URL, got {value!r}")
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ClientConfig":
        """Build a config from environment variables, falling back to defaults."""
        environ = os.environ if environ is None else environ
        values = {}
        if environ.get("FUEL_GRAPHQL_ENDPOINT"):
            values["endpoint"] = environ["FUEL_GRAPHQL_ENDPOINT"]
        if environ.get("FUEL_GRAPHQL_TIMEOUT"):
            values["timeout"] = environ["FUEL_GRAPHQL_TIMEOUT"]
        return cls(**values)
