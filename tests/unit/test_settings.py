"""Unit tests for environment-driven settings."""
from pathlib import Path

import pytest
from pydantic import ValidationError

from sidecar_encoder.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    # no stray .env or APP_* values from the developer's shell
    monkeypatch.chdir(tmp_path)
    for name in ("APP_SIDECAR_PATH", "APP_SIDECAR_TIMEOUT", "APP_MAX_CONCURRENT_SIDECARS",
                 "APP_API_PORT", "APP_API_HOST", "APP_LOG_LEVEL", "APP_ENV"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    cfg = get_settings()
    assert cfg.sidecar_path == Path("/shared-bin/sidecar")
    assert cfg.api_port == 8080
    assert cfg.sidecar_timeout == 10.0
    assert cfg.max_concurrent_sidecars == 16
    assert cfg.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("APP_SIDECAR_PATH", "/opt/bin/sidecar")
    monkeypatch.setenv("APP_API_PORT", "9090")
    monkeypatch.setenv("APP_SIDECAR_TIMEOUT", "1.5")

    cfg = get_settings()
    assert cfg.sidecar_path == Path("/opt/bin/sidecar")
    assert cfg.api_port == 9090
    assert cfg.sidecar_timeout == 1.5


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("APP_MAX_CONCURRENT_SIDECARS=3\n")
    assert get_settings().max_concurrent_sidecars == 3


@pytest.mark.parametrize("name, value", [
    ("APP_SIDECAR_TIMEOUT", "0"),
    ("APP_MAX_CONCURRENT_SIDECARS", "0"),
    ("APP_LOG_LEVEL", "LOUD"),
])
def test_invalid_values_rejected(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings()
