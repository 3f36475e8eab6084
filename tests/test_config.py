"""Tests for settings loading."""
import pytest
from leitner.config import Settings, load_settings, read_config_file
from leitner.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("LEITNER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LEITNER_STRICT_UPDATES", raising=False)
    monkeypatch.delenv("LEITNER_VALIDATE_ON_APPLY", raising=False)


def test_missing_file_gives_defaults(tmp_config):
    assert load_settings(tmp_config) == Settings()


def test_empty_file_gives_defaults(tmp_config):
    with open(tmp_config, "w") as f:
        f.write("")
    assert read_config_file(tmp_config) == {}
    assert load_settings(tmp_config) == Settings()


def test_load_settings_from_yaml(tmp_config):
    with open(tmp_config, "w") as f:
        f.write("log_level: debug\nstrict_updates: true\nvalidate_on_apply: yes\n")
    settings = load_settings(tmp_config)
    assert settings.log_level == "DEBUG"
    assert settings.strict_updates is True
    assert settings.validate_on_apply is True


def test_env_overrides_file(tmp_config, monkeypatch):
    with open(tmp_config, "w") as f:
        f.write("log_level: ERROR\nstrict_updates: false\n")
    monkeypatch.setenv("LEITNER_LOG_LEVEL", "info")
    monkeypatch.setenv("LEITNER_STRICT_UPDATES", "1")
    settings = load_settings(tmp_config)
    assert settings.log_level == "INFO"
    assert settings.strict_updates is True


def test_env_enables_validation(tmp_config, monkeypatch):
    monkeypatch.setenv("LEITNER_VALIDATE_ON_APPLY", "true")
    assert load_settings(tmp_config).validate_on_apply is True


# --- Edge case tests ---


def test_invalid_yaml_raises(tmp_config):
    with open(tmp_config, "w") as f:
        f.write("log_level: [unclosed\n")
    with pytest.raises(ConfigError):
        load_settings(tmp_config)


def test_non_mapping_raises(tmp_config):
    with open(tmp_config, "w") as f:
        f.write("- just\n- a list\n")
    with pytest.raises(ConfigError, match="mapping"):
        load_settings(tmp_config)


def test_unknown_key_raises(tmp_config):
    with open(tmp_config, "w") as f:
        f.write("max_bucket: 5\n")
    with pytest.raises(ConfigError, match="max_bucket"):
        load_settings(tmp_config)


def test_bad_log_level_raises(tmp_config):
    with open(tmp_config, "w") as f:
        f.write("log_level: LOUD\n")
    with pytest.raises(ConfigError):
        load_settings(tmp_config)


def test_bad_boolean_raises(tmp_config, monkeypatch):
    monkeypatch.setenv("LEITNER_STRICT_UPDATES", "maybe")
    with pytest.raises(ConfigError):
        load_settings(tmp_config)
