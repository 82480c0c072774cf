import sys
from pathlib import Path

import pytest

# Ensure project root on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dbconfig.core.settings import Settings, get_settings
from dbconfig.db.config import get_environment_configs

ENV_VARS = (
    "DB_HOST",
    "DB_PORT",
    "DB_NAME",
    "DB_NAME_FILE",
    "DB_USER",
    "DB_USER_FILE",
    "DB_PASSWORD",
    "DB_PASSWORD_FILE",
    "APP_ENV",
    "SERVICE_NAME",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run every test with no DB_* variables, no .env file and empty caches."""

    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(name.lower(), raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    get_environment_configs.cache_clear()
    yield
    get_settings.cache_clear()
    get_environment_configs.cache_clear()


@pytest.fixture()
def secret_file(tmp_path):
    """Write a secret file and return its path as a string."""

    def _write(name: str, content: str) -> str:
        path = tmp_path / "secrets" / name
        path.parent.mkdir(exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture()
def full_env(monkeypatch):
    """Environment with every connection value set directly."""

    monkeypatch.setenv("DB_HOST", "db.internal")
    monkeypatch.setenv("DB_PORT", "6543")
    monkeypatch.setenv("DB_NAME", "app")
    monkeypatch.setenv("DB_USER", "app_user")
    monkeypatch.setenv("DB_PASSWORD", "s3cret")
    return Settings(_env_file=None)
