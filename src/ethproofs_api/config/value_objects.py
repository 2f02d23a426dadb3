"""Configuration value objects for dependency injection.

Components receive the specific frozen dataclass they need rather than the
whole settings tree.
"""

from dataclasses import dataclass

PRODUCTION_URL = "https://ethproofs.org/api/v0"
STAGING_URL = "https://staging--ethproofs.netlify.app/api/v0"


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuration for the aiohttp transport.

    ``None`` timeouts leave deadlines to the caller.
    """

    timeout: float | None = None
    connect_timeout: float | None = None
    verify_ssl: bool = True


@dataclass(frozen=True)
class EthProofsConfig:
    """Configuration for EthProofs API client."""

    base_url: str
    api_key: str
    http_config: HttpClientConfig = None

    def __post_init__(self):
        """Set defaults for nested configs."""
        if self.http_config is None:
            object.__setattr__(self, "http_config", HttpClientConfig())
