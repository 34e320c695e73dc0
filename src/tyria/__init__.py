"""
Tyria Client Library.

A typed async client for the Guild Wars 2 v2 API.

Example usage:
    ```python
    from tyria import TyriaClient

    async with TyriaClient(token="my-api-key") as client:
        # Authenticated endpoint
        account = (await client.account.get()).unwrap()

        # Bulk lookups; unknown IDs are skipped
        result = await client.skills.get_many([14375, 14381, 999999])

        # Documented failures come back as values
        result = await client.achievements.get(42)
        if result.is_err():
            print(result.error.message)
    ```
"""

__version__ = "0.1.0"

# Main client
from tyria.client import TyriaClient

# Configuration
from tyria.config import TyriaSettings, configure_settings, get_settings, reset_settings

# HTTP client components (for advanced usage)
from tyria.http import AsyncHTTPClient, ClientSession

# Base classes (for building custom clients)
from tyria.base import BaseEndpointClient, BulkEndpointClient, Route, authenticated

# Endpoint templates and parameter encoding
from tyria.paths import Endpoint, resolve
from tyria.params import number_to_param, numbers_to_param, string_to_param, strings_to_param

# Outcomes
from tyria.dispatch import parse_response
from tyria.result import Err, Ok, Result

# Exceptions
from tyria.exceptions import (
    # Base exception
    TyriaClientError,
    # Returned inside Err
    ApiError,
    UnknownStatusError,
    # Raised
    MalformedResponseError,
    AuthenticationError,
    NetworkError,
    TimeoutError,
    ConnectionError,
)

__all__ = [
    # Version
    "__version__",
    # Main client
    "TyriaClient",
    # Configuration
    "TyriaSettings",
    "configure_settings",
    "get_settings",
    "reset_settings",
    # HTTP components
    "AsyncHTTPClient",
    "ClientSession",
    # Base classes
    "BaseEndpointClient",
    "BulkEndpointClient",
    "Route",
    "authenticated",
    # Paths and params
    "Endpoint",
    "resolve",
    "number_to_param",
    "numbers_to_param",
    "string_to_param",
    "strings_to_param",
    # Outcomes
    "parse_response",
    "Ok",
    "Err",
    "Result",
    # Exceptions
    "TyriaClientError",
    "ApiError",
    "UnknownStatusError",
    "MalformedResponseError",
    "AuthenticationError",
    "NetworkError",
    "TimeoutError",
    "ConnectionError",
]
