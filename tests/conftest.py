import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep PRODIA_* variables from the developer's shell out of the tests."""
    for name in ("TOKEN", "BASE_URL", "MAX_ERRORS", "MAX_RETRIES", "TIMEOUT"):
        monkeypatch.delenv(f"PRODIA_{name}", raising=False)
