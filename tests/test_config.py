from __future__ import annotations

import logging
import os

import pytest

from stream_client import config
from stream_client.config import ConfigError, endpoint_from_config, load_config, policy_from_config
from stream_client.core.retry import ExponentialBackoffPolicy, FixedIntervalPolicy


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith(config.ENV_PREFIX):
            monkeypatch.delenv(key)
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_defaults_without_env_file(tmp_path):
    loaded = load_config(str(tmp_path / "missing.env"))
    assert loaded["stream"] == "user"
    assert loaded["read_timeout"] == 60.0
    assert loaded["reconnect_interval"] == 5.0
    assert loaded["reconnect_strategy"] == "fixed"
    assert loaded["log_level"] == "INFO"


def test_environment_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("STREAM_BASE_URL", "wss://pleroma.example/api/v1/streaming")
    monkeypatch.setenv("STREAM_READ_TIMEOUT", "15")
    monkeypatch.setenv("STREAM_MAX_RECONNECT_RETRIES", "4")
    monkeypatch.setenv("STREAM_LOG_LEVEL", "debug")
    loaded = load_config(str(tmp_path / "missing.env"))
    assert loaded["base_url"] == "wss://pleroma.example/api/v1/streaming"
    assert loaded["read_timeout"] == 15.0
    assert loaded["max_reconnect_retries"] == 4
    assert loaded["log_level"] == "DEBUG"


def test_env_file_is_loaded(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("STREAM_STREAM=public:local\nSTREAM_ACCESS_TOKEN=abc\n", encoding="utf-8")
    # register the keys so monkeypatch removes what load_dotenv sets
    for key in ("STREAM_STREAM", "STREAM_ACCESS_TOKEN"):
        monkeypatch.setenv(key, "placeholder")
        monkeypatch.delenv(key)
    loaded = load_config(str(env_file))
    assert loaded["stream"] == "public:local"
    assert loaded["access_token"] == "abc"


@pytest.mark.parametrize(
    "key,value",
    [
        ("STREAM_BASE_URL", "ftp://example/streaming"),
        ("STREAM_STREAM", ""),
        ("STREAM_READ_TIMEOUT", "0"),
        ("STREAM_READ_TIMEOUT", "soon"),
        ("STREAM_RECONNECT_INTERVAL", "-1"),
        ("STREAM_RECONNECT_STRATEGY", "random"),
        ("STREAM_MAX_RECONNECT_RETRIES", "-3"),
        ("STREAM_LOG_LEVEL", "chatty"),
    ],
)
def test_invalid_values_raise_config_error(tmp_path, monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ConfigError):
        load_config(str(tmp_path / "missing.env"))


def test_exponential_requires_sane_bounds(tmp_path, monkeypatch):
    monkeypatch.setenv("STREAM_RECONNECT_STRATEGY", "exponential")
    monkeypatch.setenv("STREAM_RECONNECT_INTERVAL", "10")
    monkeypatch.setenv("STREAM_MAX_RECONNECT_BACKOFF", "5")
    with pytest.raises(ConfigError):
        load_config(str(tmp_path / "missing.env"))


def test_endpoint_from_config_splits_params():
    endpoint = endpoint_from_config(
        {
            "base_url": "wss://x/api",
            "stream": "hashtag",
            "params": "tag=python, local=true,",
            "access_token": "",
        }
    )
    assert endpoint.params == ("tag=python", "local=true")
    assert endpoint.access_token is None
    assert endpoint.build_url() == "wss://x/api?stream=hashtag&tag=python&local=true"


def test_endpoint_from_config_without_params():
    endpoint = endpoint_from_config({"base_url": "wss://x/api", "stream": "user", "params": "", "access_token": "t"})
    assert endpoint.params is None
    assert endpoint.build_url() == "wss://x/api?stream=user&access_token=t"


def test_policy_from_config_fixed_is_unlimited_by_default():
    policy = policy_from_config(dict(config.DEFAULT_CONFIG))
    assert isinstance(policy, FixedIntervalPolicy)
    assert policy.max_attempts is None
    assert policy.next_delay(1000) == 5.0


def test_policy_from_config_exponential():
    settings = dict(config.DEFAULT_CONFIG, reconnect_strategy="exponential", max_reconnect_retries=3)
    policy = policy_from_config(settings)
    assert isinstance(policy, ExponentialBackoffPolicy)
    assert policy.max_attempts == 3
    assert policy.next_delay(2) == 10.0
