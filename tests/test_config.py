"""
Tests for RequestConfig and environment resolution.
"""
import pytest
from pydantic import ValidationError

from request_dsl.config import ENV_BASE_URL, ENV_DEFAULT_TIMEOUT, RequestConfig, resolve_config


def test_default_values():
    config = RequestConfig()
    assert config.default_timeout == 5000
    assert config.default_headers == {}
    assert config.base_url == ""


def test_custom_values():
    config = RequestConfig(
        default_timeout=10000,
        default_headers={"Accept": "application/json"},
        base_url="https://api.example.com",
    )
    assert config.default_timeout == 10000
    assert len(config.default_headers) == 1
    assert config.base_url == "https://api.example.com"


@pytest.mark.parametrize("timeout", [0, -5])
def test_non_positive_timeout_rejected(timeout):
    with pytest.raises(ValidationError) as exc:
        RequestConfig(default_timeout=timeout)
    assert "default_timeout must be a positive number of milliseconds" in str(exc.value)


def test_config_is_frozen():
    config = RequestConfig()
    with pytest.raises(ValidationError):
        config.default_timeout = 1


class TestResolveConfig:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv(ENV_DEFAULT_TIMEOUT, raising=False)
        monkeypatch.delenv(ENV_BASE_URL, raising=False)
        assert resolve_config() == RequestConfig()

    def test_env(self, monkeypatch):
        monkeypatch.setenv(ENV_DEFAULT_TIMEOUT, "12000")
        monkeypatch.setenv(ENV_BASE_URL, " https://env.example.com ")
        config = resolve_config()
        assert config.default_timeout == 12000
        assert config.base_url == "https://env.example.com"

    def test_argument_beats_env(self, monkeypatch):
        monkeypatch.setenv(ENV_DEFAULT_TIMEOUT, "12000")
        assert resolve_config(default_timeout=3000).default_timeout == 3000

    def test_env_beats_config_dict(self, monkeypatch):
        monkeypatch.delenv(ENV_DEFAULT_TIMEOUT, raising=False)
        monkeypatch.setenv(ENV_BASE_URL, "https://env.example.com")
        config = resolve_config({"base_url": "https://dict.example.com", "default_timeout": 7000})
        assert config.base_url == "https://env.example.com"
        assert config.default_timeout == 7000

    def test_config_dict(self, monkeypatch):
        monkeypatch.delenv(ENV_DEFAULT_TIMEOUT, raising=False)
        monkeypatch.delenv(ENV_BASE_URL, raising=False)
        config = resolve_config({"default_timeout": 7000, "default_headers": {"Accept": "application/json"}})
        assert config.default_timeout == 7000
        assert config.default_headers == {"Accept": "application/json"}

    def test_unparsable_env_timeout_rejected(self, monkeypatch):
        monkeypatch.setenv(ENV_DEFAULT_TIMEOUT, "soon")
        with pytest.raises(ValueError) as exc:
            resolve_config()
        assert ENV_DEFAULT_TIMEOUT in str(exc.value)

    def test_unparsable_env_ignored_when_argument_given(self, monkeypatch):
        monkeypatch.setenv(ENV_DEFAULT_TIMEOUT, "soon")
        assert resolve_config(default_timeout=3000).default_timeout == 3000

    def test_blank_env_is_unset(self, monkeypatch):
        monkeypatch.setenv(ENV_DEFAULT_TIMEOUT, "  ")
        monkeypatch.setenv(ENV_BASE_URL, "")
        config = resolve_config({"base_url": "https://dict.example.com"})
        assert config.default_timeout == 5000
        assert config.base_url == "https://dict.example.com"
