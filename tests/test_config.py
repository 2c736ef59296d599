"""Configuration module unit tests"""

from pathlib import Path

import pytest

from vitae.config import ApiConfig, Config
from vitae.errors import ConfigException


@pytest.fixture
def temp_config_file(tmp_path):
    return tmp_path / "config.toml"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("VITAE_LOG_FILE", "VITAE_API__BASE_URL", "VITAE_API__TIMEOUT"):
        monkeypatch.delenv(key, raising=False)


def test_load_defaults_without_file():
    config = Config.load()

    assert config.log_file == "data/vitae.log"
    assert str(config.api.base_url) == "https://api.danielleitelima.com/"
    assert config.api.timeout == 30
    assert config.api.resume_path == "getResume"
    assert config.api.samples_path == "getCodeSamples"
    assert config.api.run_path == "runCodeSample"


def test_load_from_file(temp_config_file):
    temp_config_file.write_text(
        """
log_file = "logs/app.log"

[api]
base_url = "https://resume.example.com"
timeout = 10
run_path = "/execute/"
"""
    )

    config = Config.load_from_file(str(temp_config_file))

    assert config.log_file == "logs/app.log"
    assert str(config.api.base_url) == "https://resume.example.com/"
    assert config.api.timeout == 10
    assert config.api.run_path == "execute"
    assert config.api.resume_path == "getResume"


def test_env_overrides_file(temp_config_file, monkeypatch):
    temp_config_file.write_text('[api]\ntimeout = 10\n')
    monkeypatch.setenv("VITAE_API__TIMEOUT", "42")

    config = Config.load(str(temp_config_file))

    assert config.api.timeout == 42


def test_env_without_file(monkeypatch):
    monkeypatch.setenv("VITAE_API__BASE_URL", "http://localhost:8080")

    config = Config.load()

    assert config.api.endpoint("getResume") == "http://localhost:8080/getResume"


def test_missing_file():
    with pytest.raises(ConfigException, match="Configuration file not found"):
        Config.load_from_file("/nonexistent/config.toml")


def test_invalid_timeout(temp_config_file):
    temp_config_file.write_text("[api]\ntimeout = 0\n")

    with pytest.raises(ConfigException) as exc_info:
        Config.load_from_file(str(temp_config_file))

    assert "Configuration validation failed" in str(exc_info.value)
    assert "api -> timeout" in str(exc_info.value)


def test_invalid_url(temp_config_file):
    temp_config_file.write_text('[api]\nbase_url = "not a url"\n')

    with pytest.raises(ConfigException, match="api -> base_url"):
        Config.load_from_file(str(temp_config_file))


def test_invalid_toml(temp_config_file):
    temp_config_file.write_text("[api\ntimeout = ")

    with pytest.raises(ConfigException):
        Config.load_from_file(str(temp_config_file))


def test_empty_api_path():
    with pytest.raises(ValueError):
        ApiConfig(run_path=" / ")


def test_endpoint_joins_paths():
    config = ApiConfig(base_url="https://api.example.com/")

    assert config.endpoint(config.samples_path) == "https://api.example.com/getCodeSamples"


def test_path_object_accepted(temp_config_file):
    temp_config_file.write_text("")

    config = Config.load(str(Path(temp_config_file)))

    assert config.api.timeout == 30
