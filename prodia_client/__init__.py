"""Prodia Client - Python client library for the Prodia inference API."""

from .client import ProdiaClient
from .async_client import AsyncProdiaClient
from .config import ClientConfig, Settings, DEFAULT_BASE_URL
from .models import (
    JobOptions,
    JobPayload,
    JobResult,
)
from .exceptions import (
    ProdiaClientError,
    ConfigurationError,
    CapacityError,
    UserError,
    BadResponseError,
    ResponseDecodeError,
    OutputReadError,
)

__version__ = "2.0.0"

__all__ = [
    # Clients
    "ProdiaClient",
    "AsyncProdiaClient",
    # Configuration
    "ClientConfig",
    "Settings",
    "DEFAULT_BASE_URL",
    # Models
    "JobOptions",
    "JobPayload",
    "JobResult",
    # Exceptions
    "ProdiaClientError",
    "ConfigurationError",
    "CapacityError",
    "UserError",
    "BadResponseError",
    "ResponseDecodeError",
    "OutputReadError",
]
