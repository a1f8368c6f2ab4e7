# SPDX-License-Identifier: Apache-2.0
"""Python client for the TranslatePlus translation API.

Usage:
    from translateplus import TranslatePlusClient

    async with TranslatePlusClient(api_key="your-api-key") as client:
        result = await client.translate("Hello", target="fr")

    # Or read TRANSLATEPLUS_API_KEY (and friends) from the environment
    client = TranslatePlusClient.from_env()
"""

from translateplus._version import __version__
from translateplus.client import TranslatePlusClient
from translateplus.config import ClientConfig
from translateplus.dispatcher import RequestDispatcher
from translateplus.errors import (
    APIError,
    AuthenticationError,
    InsufficientCreditsError,
    RateLimitError,
    TranslatePlusError,
    ValidationError,
)

__all__ = [
    "__version__",
    # Client
    "TranslatePlusClient",
    "ClientConfig",
    "RequestDispatcher",
    # Exceptions
    "TranslatePlusError",
    "ValidationError",
    "APIError",
    "AuthenticationError",
    "InsufficientCreditsError",
    "RateLimitError",
]
