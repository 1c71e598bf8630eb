import pytest
from pydantic import ValidationError

from prodia_client import ClientConfig, ConfigurationError, DEFAULT_BASE_URL, JobOptions, Settings
from prodia_client.models import merge_job_options


def test_defaults():
    config = ClientConfig(token="t")

    assert config.base_url == DEFAULT_BASE_URL == "https://inference.prodia.com/v2"
    assert config.max_errors == 1
    assert config.max_retries is None


def test_config_is_immutable():
    config = ClientConfig(token="t")

    with pytest.raises(ValidationError):
        config.max_errors = 5


def test_token_not_in_repr():
    assert "secret-token" not in repr(ClientConfig(token="secret-token"))


def test_negative_budgets_rejected():
    with pytest.raises(ValidationError):
        ClientConfig(token="t", max_errors=-1)
    with pytest.raises(ValidationError):
        ClientConfig(token="t", max_retries=-1)


def test_from_environment(monkeypatch):
    monkeypatch.setenv("PRODIA_TOKEN", "env-token")
    monkeypatch.setenv("PRODIA_BASE_URL", "https://staging.example.test/v2/")
    monkeypatch.setenv("PRODIA_MAX_ERRORS", "3")
    monkeypatch.setenv("PRODIA_MAX_RETRIES", "7")

    config = ClientConfig.from_settings(Settings())

    assert config.token == "env-token"
    assert config.base_url == "https://staging.example.test/v2"
    assert config.max_errors == 3
    assert config.max_retries == 7


def test_explicit_values_override_environment(monkeypatch):
    monkeypatch.setenv("PRODIA_TOKEN", "env-token")
    monkeypatch.setenv("PRODIA_MAX_ERRORS", "3")

    config = ClientConfig.from_settings(Settings(), token="arg-token", max_errors=0)

    assert config.token == "arg-token"
    assert config.max_errors == 0


def test_missing_token():
    with pytest.raises(ConfigurationError, match="PRODIA_TOKEN"):
        ClientConfig.from_settings(Settings())


def test_options_default():
    options = merge_job_options()

    assert options.accept is None
    assert options.inputs is None


def test_options_override_is_flat():
    inputs = [b"a"]

    options = merge_job_options({"inputs": inputs})
    assert options.accept is None
    assert options.inputs == inputs

    options = merge_job_options(JobOptions(accept="image/webp"))
    assert options.accept == "image/webp"
    assert options.inputs is None


def test_unknown_accept_rejected():
    with pytest.raises(ValidationError):
        merge_job_options({"accept": "text/plain"})
