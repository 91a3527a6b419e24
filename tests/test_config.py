"""
Settings tests: defaults, environment overrides and .env discovery.
"""

import os

import pytest
from pydantic import ValidationError

from dischargeai.core import config
from dischargeai.core.config import (
    CORSSettings,
    DatabaseSettings,
    HospitalSettings,
    LoggingSettings,
    OpenAISettings,
    Settings,
    StorageSettings,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "OPENAI_MAX_TOKENS", "OPENAI_TEMPERATURE", "OPENAI_MAX_RETRIES", "OPENAI_MODEL",
        "STORAGE_BACKEND", "MONGO_URI", "HOSPITAL_NAME", "CORS_ALLOWED_ORIGINS", "APP_ENV",
    ):
        monkeypatch.delenv(name, raising=False)


def test_completion_defaults():
    openai = OpenAISettings()
    assert openai.model == "gpt-4o-mini"
    assert openai.max_tokens == 1500
    assert openai.temperature is None
    assert openai.max_retries == 0


def test_letterhead_defaults():
    hospital = HospitalSettings()
    assert hospital.name == "ESIC MEDICAL COLLEGE & HOSPITAL"
    assert hospital.department == "DEPARTMENT OF PEDIATRICS"
    assert hospital.address == "KK Nagar, Chennai - 600078"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("OPENAI_MAX_TOKENS", "900")
    monkeypatch.setenv("OPENAI_TEMPERATURE", "0.2")
    monkeypatch.setenv("STORAGE_BACKEND", "MEMORY")
    monkeypatch.setenv("HOSPITAL_NAME", "City Hospital")

    settings = Settings()
    assert settings.openai.max_tokens == 900
    assert settings.openai.temperature == 0.2
    assert settings.storage.backend == "memory"
    assert settings.hospital.name == "City Hospital"


@pytest.mark.parametrize("factory", [
    lambda: StorageSettings(backend="postgres"),
    lambda: DatabaseSettings(uri="postgres://localhost"),
    lambda: OpenAISettings(max_tokens=0),
    lambda: OpenAISettings(temperature=3.5),
    lambda: OpenAISettings(max_retries=9),
    lambda: LoggingSettings(level="CHATTY"),
    lambda: Settings(app_env="qa"),
])
def test_invalid_values_rejected(factory):
    with pytest.raises(ValidationError):
        factory()


def test_cors_origins_parsed_from_string():
    assert CORSSettings(allowed_origins="http://a.test, http://b.test").allowed_origins == [
        "http://a.test",
        "http://b.test",
    ]
    assert CORSSettings(allowed_origins='["http://c.test"]').allowed_origins == ["http://c.test"]


def test_env_file_found_in_parent_directory(monkeypatch, tmp_path):
    """.env in a parent of the working directory is loaded without overriding set variables."""
    (tmp_path / ".env").write_text("HOSPITAL_DEPARTMENT=From Env File\nHOSPITAL_ADDRESS=From Env File\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)

    # Register both so monkeypatch restores them after load_dotenv writes os.environ
    monkeypatch.setenv("HOSPITAL_DEPARTMENT", "placeholder")
    monkeypatch.delenv("HOSPITAL_DEPARTMENT")
    monkeypatch.setenv("HOSPITAL_ADDRESS", "Already Set")

    config._load_env_file_if_available()

    assert os.environ["HOSPITAL_DEPARTMENT"] == "From Env File"
    assert os.environ["HOSPITAL_ADDRESS"] == "Already Set"


def test_get_settings_is_cached(monkeypatch):
    monkeypatch.setattr(config, "_settings", None)
    first = config.get_settings()
    assert config.get_settings() is first
