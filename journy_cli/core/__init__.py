"""Core CLI components - configuration, API client, and error kinds."""

from journy_cli.core.api_client import APIResponse, JournyClient
from journy_cli.core.config import CLIConfig, ConfigStore, Settings
from journy_cli.core.errors import (
    ApiError,
    JournyError,
    PreconditionError,
    RateLimitedError,
    RequestFailedError,
    TransportError,
    UnauthorizedError,
)

__all__ = [
    "APIResponse",
    "JournyClient",
    "CLIConfig",
    "ConfigStore",
    "Settings",
    "JournyError",
    "PreconditionError",
    "TransportError",
    "UnauthorizedError",
    "RateLimitedError",
    "ApiError",
    "RequestFailedError",
]
