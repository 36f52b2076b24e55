"""Settings — environment resolution and appsettings layering."""

import pytest
from pydantic_settings import SettingsConfigDict

from blackslope.core.settings import Settings, appsettings_files, resolve_env


@pytest.fixture
def no_env_var(monkeypatch):
    monkeypatch.delenv("ENV", raising=False)


def test_env_variable_wins_over_dotenv(monkeypatch, tmp_path):
    dotenv = tmp_path / ".env"
    dotenv.write_text("ENV=prod\n", encoding="utf-8")
    monkeypatch.setenv("ENV", "staging")

    assert resolve_env(dotenv) == "staging"


def test_env_read_from_dotenv_when_variable_absent(no_env_var, tmp_path):
    dotenv = tmp_path / ".env"
    dotenv.write_text("ENV=prod\n", encoding="utf-8")

    assert resolve_env(dotenv) == "prod"


@pytest.mark.parametrize("value", ["production", "PRODUCTION", " Prod "])
def test_production_aliases_resolve_to_prod(no_env_var, tmp_path, value):
    dotenv = tmp_path / ".env"
    dotenv.write_text(f"ENV={value}\n", encoding="utf-8")

    assert resolve_env(dotenv) == "prod"


def test_env_defaults_to_dev(no_env_var, tmp_path):
    assert resolve_env(tmp_path / "missing.env") == "dev"


def test_prod_appsettings_override_base_file(monkeypatch):
    for key in ("LOG_TO_FILE", "JWT_ALGORITHMS", "ENV"):
        monkeypatch.delenv(key, raising=False)

    class ProdSettings(Settings):
        model_config = SettingsConfigDict(
            env_file=None,
            json_file=[str(p) for p in appsettings_files("prod")],
        )

    prod = ProdSettings()

    assert prod.LOG_TO_FILE is True
    assert prod.JWT_ALGORITHMS == "RS256"
    assert prod.APP_NAME == "BlackSlope API"


@pytest.mark.parametrize("env, expected", [("prod", True), ("production", True), ("dev", False)])
def test_is_prod(env, expected):
    assert Settings(ENV=env).is_prod is expected
