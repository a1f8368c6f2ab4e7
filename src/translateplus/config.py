# SPDX-License-Identifier: Apache-2.0
"""Client configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, ClassVar

from translateplus.errors import ValidationError

DEFAULT_BASE_URL = "https://api.translateplus.io"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3
DEFAULT_MAX_CONCURRENT = 5


@dataclass(frozen=True)
class ClientConfig:
    """Immutable configuration for TranslatePlusClient.

    Attributes:
        api_key: TranslatePlus API key (required).
        base_url: API base URL. A trailing slash is stripped.
        timeout: Per-attempt timeout in seconds (connect and read).
        max_retries: Retries after a transport failure (total attempts = max_retries + 1).
        max_concurrent: Maximum number of requests in flight at once.
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    max_concurrent: int = DEFAULT_MAX_CONCURRENT

    # Environment variable names used by from_env()
    ENV_VARS: ClassVar[dict[str, str]] = {
        "api_key": "TRANSLATEPLUS_API_KEY",
        "base_url": "TRANSLATEPLUS_BASE_URL",
        "timeout": "TRANSLATEPLUS_TIMEOUT",
        "max_retries": "TRANSLATEPLUS_MAX_RETRIES",
        "max_concurrent": "TRANSLATEPLUS_MAX_CONCURRENT",
    }

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ValidationError("API key is required")
        if self.timeout <= 0:
            raise ValidationError("timeout must be positive")
        if self.max_retries < 0:
            raise ValidationError("max_retries must be zero or greater")
        if self.max_concurrent < 1:
            raise ValidationError("max_concurrent must be at least 1")

        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "base_url", (self.base_url or DEFAULT_BASE_URL).rstrip("/"))

    def url_for(self, endpoint: str) -> str:
        """Join an endpoint path to the base URL with a single slash."""
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    @classmethod
    def from_env(cls, **overrides: Any) -> ClientConfig:
        """Build a config from TRANSLATEPLUS_* environment variables.

        Keyword overrides that are not None take precedence over the environment.

        Raises:
            ValidationError: If no API key is found or a numeric value is invalid.
        """
        converters = {
            "api_key": str,
            "base_url": str,
            "timeout": float,
            "max_retries": int,
            "max_concurrent": int,
        }
        values: dict[str, Any] = {}
        for field_name, env_var in cls.ENV_VARS.items():
            override = overrides.get(field_name)
            if override is not None:
                values[field_name] = override
                continue
            raw = os.environ.get(env_var)
            if not raw:
                continue
            try:
                values[field_name] = converters[field_name](raw)
            except ValueError:
                raise ValidationError(f"Invalid value for {env_var}: {raw!r}") from None

        values.setdefault("api_key", "")
        return cls(**values)
