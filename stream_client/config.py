from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional
from urllib.parse import urlsplit

from dotenv import load_dotenv

from stream_client.core.endpoint import EndpointConfig
from stream_client.core.retry import ExponentialBackoffPolicy, FixedIntervalPolicy, RetryPolicy
from stream_shared.protocol.constants import READ_TIMEOUT_SECONDS, RECONNECT_INTERVAL_SECONDS

ENV_PREFIX = "STREAM_"

DEFAULT_CONFIG: Dict[str, Any] = {
    "base_url": "wss://localhost/api/v1/streaming",
    "stream": "user",
    "access_token": "",
    "params": "",
    "read_timeout": READ_TIMEOUT_SECONDS,
    "reconnect_interval": RECONNECT_INTERVAL_SECONDS,
    "reconnect_strategy": "fixed",
    "max_reconnect_backoff": 300.0,
    "max_reconnect_retries": 0,
    "log_level": "INFO",
}

CLIENT_CONFIG: Dict[str, Any] = DEFAULT_CONFIG.copy()

RECONNECT_STRATEGIES = ("fixed", "exponential")
URL_SCHEMES = ("ws", "wss", "http", "https")


class ConfigError(Exception):
    """Raised when configuration values are invalid."""

    pass


def load_config(env_path: str = ".env") -> Dict[str, Any]:
    """Load client configuration from env file/environment variables."""
    if os.path.exists(env_path):
        load_dotenv(env_path)

    for key, default_value in DEFAULT_CONFIG.items():
        env_key = f"{ENV_PREFIX}{key.upper()}"
        value = os.getenv(env_key, default_value)
        CLIENT_CONFIG[key] = _coerce_type(value, type(default_value))

    _validate_config(CLIENT_CONFIG)
    logging.getLogger().setLevel(CLIENT_CONFIG["log_level"])
    return CLIENT_CONFIG


def _coerce_type(value: Any, target_type: type) -> Any:
    if isinstance(value, target_type):
        return value
    try:
        if target_type is bool:
            return str(value).lower() in ("1", "true", "yes", "on")
        return target_type(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Cannot convert {value} to {target_type}") from exc


def _validate_config(config: Dict[str, Any]) -> None:
    scheme = urlsplit(config["base_url"]).scheme
    if scheme not in URL_SCHEMES:
        raise ConfigError(f"base_url must use one of {', '.join(URL_SCHEMES)}")
    if not config["stream"]:
        raise ConfigError("stream must not be empty")
    if config["read_timeout"] <= 0:
        raise ConfigError("read_timeout must be positive")
    if config["reconnect_interval"] < 0:
        raise ConfigError("reconnect_interval must not be negative")
    if config["reconnect_strategy"] not in RECONNECT_STRATEGIES:
        raise ConfigError(f"reconnect_strategy must be one of {', '.join(RECONNECT_STRATEGIES)}")
    if config["max_reconnect_retries"] < 0:
        raise ConfigError("max_reconnect_retries must not be negative")
    config["log_level"] = str(config["log_level"]).upper()
    if not isinstance(logging.getLevelName(config["log_level"]), int):
        raise ConfigError(f"Unknown log_level {config['log_level']}")
    if config["reconnect_strategy"] == "exponential":
        if config["reconnect_interval"] <= 0:
            raise ConfigError("reconnect_interval must be positive for exponential backoff")
        if config["max_reconnect_backoff"] < config["reconnect_interval"]:
            raise ConfigError("max_reconnect_backoff must be at least reconnect_interval")


def endpoint_from_config(config: Optional[Dict[str, Any]] = None) -> EndpointConfig:
    config = config or CLIENT_CONFIG
    params = tuple(part.strip() for part in str(config.get("params") or "").split(",") if part.strip())
    return EndpointConfig(
        base_url=config["base_url"],
        stream=config["stream"],
        params=params or None,
        access_token=config.get("access_token") or None,
    )


def policy_from_config(config: Optional[Dict[str, Any]] = None) -> RetryPolicy:
    config = config or CLIENT_CONFIG
    max_attempts = int(config.get("max_reconnect_retries", 0)) or None
    interval = float(config.get("reconnect_interval", RECONNECT_INTERVAL_SECONDS))
    if config.get("reconnect_strategy", "fixed") == "exponential":
        return ExponentialBackoffPolicy(interval, float(config["max_reconnect_backoff"]), max_attempts)
    return FixedIntervalPolicy(interval, max_attempts)


__all__ = [
    "CLIENT_CONFIG",
    "DEFAULT_CONFIG",
    "ConfigError",
    "endpoint_from_config",
    "load_config",
    "policy_from_config",
]
