"""
Settings for applications embedding the client.

Combines an optional YAML file with environment overrides, type validation
and sensible defaults. The client itself never reads settings implicitly;
callers load them and pass the resulting value objects in.
"""

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field

from ethproofs_api.config.value_objects import (
    PRODUCTION_URL,
    STAGING_URL,
    EthProofsConfig,
    HttpClientConfig,
)
from ethproofs_api.observability import get_config_logger

log = get_config_logger("config-loader")

Environment = Literal["production", "staging"]

ENVIRONMENT_URLS: dict[str, str] = {
    "production": PRODUCTION_URL,
    "staging": STAGING_URL,
}


# =============================================================================
# PYDANTIC MODELS - Type-Safe Configuration
# =============================================================================


class ApiSettings(BaseModel):
    """EthProofs API connection settings."""

    model_config = ConfigDict(extra="allow")

    environment: Environment = Field(default="production")
    base_url: str | None = Field(
        default=None, description="Overrides the environment's URL when set"
    )
    api_key: str | None = Field(default=None, repr=False)
    timeout: float | None = Field(default=None, gt=0)
    connect_timeout: float | None = Field(default=None, gt=0)
    verify_ssl: bool = Field(default=True)

    def resolved_base_url(self) -> str:
        return self.base_url or ENVIRONMENT_URLS[self.environment]

    def to_client_config(self) -> EthProofsConfig:
        """
        Build the value object the client is constructed from.

        Raises:
            ValueError: If no API key is configured
        """
        if not self.api_key:
            raise ValueError(
                "No EthProofs API key configured (set ETHPROOFS_API_KEY)"
            )
        return EthProofsConfig(
            base_url=self.resolved_base_url(),
            api_key=self.api_key,
            http_config=HttpClientConfig(
                timeout=self.timeout,
                connect_timeout=self.connect_timeout,
                verify_ssl=self.verify_ssl,
            ),
        )


class LoggingSettings(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="allow")

    level: str = Field(default="INFO")
    json_logs: bool = Field(default=True)


class ConfigState(BaseModel):
    """Root configuration state."""

    model_config = ConfigDict(extra="allow")

    api: ApiSettings = Field(default_factory=ApiSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# =============================================================================
# CONFIG LOADER
# =============================================================================


class ConfigLoader:
    """
    Load and validate configuration.

    Merges, in order of precedence (last wins):
      1. Defaults (hardcoded)
      2. YAML file, if given and present
      3. Environment variable overrides
    """

    def __init__(
        self,
        config_file: str | Path | None = None,
        environ: dict[str, str] | None = None,
    ):
        self.config_file = Path(config_file) if config_file else None
        self.environ = os.environ if environ is None else environ

    def _load_yaml(self) -> dict[str, Any]:
        if self.config_file is None:
            return {}

        if not self.config_file.exists():
            log.debug("config_file_missing", path=str(self.config_file))
            return {}

        with open(self.config_file, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{self.config_file} must contain a mapping")
        log.debug("config_file_loaded", path=str(self.config_file))
        return data

    def _apply_env_overrides(self, config: dict[str, Any]) -> dict[str, Any]:
        """Apply environment variable overrides to config."""
        api = config.setdefault("api", {})

        if api_key := self.environ.get("ETHPROOFS_API_KEY"):
            api["api_key"] = api_key

        if base_url := self.environ.get("ETHPROOFS_RPC_URL"):
            api["base_url"] = base_url

        if environment := self.environ.get("ETHPROOFS_ENV"):
            api["environment"] = environment.lower()

        if timeout := self.environ.get("ETHPROOFS_TIMEOUT"):
            api["timeout"] = timeout

        if log_level := self.environ.get("LOG_LEVEL"):
            config.setdefault("logging", {})["level"] = log_level

        return config

    def _merge_dicts(self, base: dict, override: dict) -> dict:
        """Deep merge override into base dict."""
        result = base.copy()
        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._merge_dicts(result[key], value)
            else:
                result[key] = value
        return result

    def load(self) -> ConfigState:
        """
        Load complete configuration state.

        Raises:
            ValidationError: If configuration is invalid
        """
        config = self._merge_dicts({}, self._load_yaml())
        config = self._apply_env_overrides(config)

        state = ConfigState(**config)
        log.debug(
            "config_loaded",
            environment=state.api.environment,
            base_url=state.api.resolved_base_url(),
            api_key_set=bool(state.api.api_key),
        )
        return state


def get_config(config_file: str | Path | None = None) -> ConfigState:
    """
    Load configuration from ``config_file`` (or ``$ETHPROOFS_CONFIG``) plus
    the process environment.
    """
    if config_file is None:
        config_file = os.getenv("ETHPROOFS_CONFIG")
    return ConfigLoader(config_file=config_file).load()
