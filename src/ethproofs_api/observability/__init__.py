"""
Structured logging for the client, transport and config layers.
"""

from .logging import (
    get_client_logger,
    get_config_logger,
    # Base logger factory
    get_logger,
    get_transport_logger,
    # Setup
    setup_logging,
)

__all__ = [
    # Setup
    "setup_logging",
    # Base
    "get_logger",
    # Layer-specific
    "get_client_logger",
    "get_transport_logger",
    "get_config_logger",
]
