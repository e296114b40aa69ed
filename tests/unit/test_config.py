"""Unit tests for config.py"""

import pytest

from mdhtml.config import load_config


def test_load_config_defaults():
    """Settings defaults are used when no config.yaml, env var, or CLI override exists."""
    settings = load_config()
    assert settings.site_title == "1001harps dot com"
    assert settings.source_dir == "content"
    assert settings.output_dir == "public"
    assert settings.template == "__template.html"


def test_load_config_uses_env_output_dir(monkeypatch):
    """MDHTML_OUTPUT_DIR env var is picked up by load_config."""
    monkeypatch.setenv("MDHTML_OUTPUT_DIR", "site")
    settings = load_config()
    assert settings.output_dir == "site"


def test_load_config_reads_config_yaml(tmp_path):
    """config.yaml values replace defaults."""
    (tmp_path / "config.yaml").write_text("site_title: My Site\nsource_dir: pages\n")
    settings = load_config()
    assert settings.site_title == "My Site"
    assert settings.source_dir == "pages"


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """MDHTML_SITE_TITLE takes precedence over config.yaml."""
    (tmp_path / "config.yaml").write_text("site_title: From Yaml\n")
    monkeypatch.setenv("MDHTML_SITE_TITLE", "From Env")
    settings = load_config()
    assert settings.site_title == "From Env"


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var; None overrides are ignored."""
    monkeypatch.setenv("MDHTML_OUTPUT_DIR", "env-out")
    settings = load_config(overrides={"output_dir": "cli-out", "source_dir": None})
    assert settings.output_dir == "cli-out"
    assert settings.source_dir == "content"


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_non_mapping_yaml(tmp_path):
    """A YAML list is rejected rather than passed to Settings."""
    (tmp_path / "config.yaml").write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()


def test_load_config_rejects_unknown_log_level(monkeypatch):
    """log_level must be a logging level name."""
    monkeypatch.setenv("MDHTML_LOG_LEVEL", "LOUD")
    with pytest.raises(ValueError):
        load_config()
