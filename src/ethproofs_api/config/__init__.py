from .state import (  # noqa: F401
    ApiSettings,
    ConfigLoader,
    ConfigState,
    LoggingSettings,
    get_config,
)
from .value_objects import (  # noqa: F401
    PRODUCTION_URL,
    STAGING_URL,
    EthProofsConfig,
    HttpClientConfig,
)

__all__ = [
    "ApiSettings",
    "ConfigLoader",
    "ConfigState",
    "LoggingSettings",
    "get_config",
    "EthProofsConfig",
    "HttpClientConfig",
    "PRODUCTION_URL",
    "STAGING_URL",
]
