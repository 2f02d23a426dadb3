"""
Typed async client for the EthProofs proof-tracking API.

Modules:
- rpc: Request and response payloads, one module per endpoint group
- builders: Validated construction of cluster and single-machine requests
- client: Dispatcher turning requests into HTTP exchanges
- connectors / ports: aiohttp transport behind a small protocol
- config, observability: Settings loading and structured logging
"""

from .builders import (  # noqa: F401
    CreateClusterRequestBuilder,
    CreateSingleMachineRequestBuilder,
)
from .client import EthProofsClient  # noqa: F401
from .config import (  # noqa: F401
    PRODUCTION_URL,
    STAGING_URL,
    EthProofsConfig,
    HttpClientConfig,
)
from .exceptions import (  # noqa: F401
    ApiError,
    EthProofsError,
    InvalidFieldError,
    InvalidURLError,
    MalformedRequestError,
    MissingFieldError,
    ParseError,
    RequestError,
    RequestValidationError,
    SerializationError,
)
from .request import EthProofsRequest, RequestParts, into_parts  # noqa: F401
from .response import EthProofsResponse, ResponseKind  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    # Client
    "EthProofsClient",
    "EthProofsConfig",
    "HttpClientConfig",
    "PRODUCTION_URL",
    "STAGING_URL",
    # Requests
    "EthProofsRequest",
    "RequestParts",
    "into_parts",
    "CreateClusterRequestBuilder",
    "CreateSingleMachineRequestBuilder",
    # Responses
    "EthProofsResponse",
    "ResponseKind",
    # Errors
    "EthProofsError",
    "InvalidURLError",
    "RequestError",
    "ApiError",
    "ParseError",
    "SerializationError",
    "RequestValidationError",
    "MissingFieldError",
    "InvalidFieldError",
    "MalformedRequestError",
]
