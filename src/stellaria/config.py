"""Client configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

DEFAULT_API_KEY = "DEMO_KEY"
DEFAULT_BASE_URL = "https://api.nasa.gov"

_API_KEY_ENV_VARS = ("API_TOKEN", "NASA_API_KEY")
_BASE_URL_ENV_VAR = "STELLARIA_BASE_URL"


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class StellariaClientConfig:
    """Runtime configuration for the NASA open API client."""

    api_key: str = field(default=DEFAULT_API_KEY, repr=False)
    base_url: str = DEFAULT_BASE_URL
    apod_endpoint: str = "planetary/apod"
    user_agent: str = "stellaria/0.1.0"

    transport: TransportConfig = field(default_factory=TransportConfig)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: object,
    ) -> "StellariaClientConfig":
        """Build a config from environment variables.

        The API key is read from ``API_TOKEN`` and then ``NASA_API_KEY``;
        blank values are skipped and ``DEMO_KEY`` is used when neither is set.
        ``STELLARIA_BASE_URL`` overrides the base URL. Keyword overrides win
        over the environment.
        """

        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        for name in _API_KEY_ENV_VARS:
            value = env.get(name, "").strip()
            if value:
                values["api_key"] = value
                break
        base_url = env.get(_BASE_URL_ENV_VAR, "").strip()
        if base_url:
            values["base_url"] = base_url
        values.update(overrides)
        return cls(**values)  # type: ignore[arg-type]

    def validate(self) -> None:
        if not isinstance(self.api_key, str) or not self.api_key.strip():
            raise ValueError("api_key must not be empty")
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if not self.apod_endpoint.strip("/"):
            raise ValueError("apod_endpoint must not be empty")
        self.transport.validate()


__all__ = [
    "DEFAULT_API_KEY",
    "DEFAULT_BASE_URL",
    "TransportConfig",
    "StellariaClientConfig",
]
