"""Tests configuration par variables d'environnement."""
from page_studio.config import StudioConfig, configure_logging, get_config


def test_defaults(monkeypatch):
    for name in ("PAGE_STUDIO_HISTORY_LIMIT", "PAGE_STUDIO_LOG_LEVEL", "PAGE_STUDIO_COMPONENT_NAME"):
        monkeypatch.delenv(name, raising=False)
    config = get_config()
    assert config.history_limit is None
    assert config.log_level == "INFO"
    assert config.component_name == "Page"


def test_from_environment(monkeypatch):
    monkeypatch.setenv("PAGE_STUDIO_HISTORY_LIMIT", "25")
    monkeypatch.setenv("PAGE_STUDIO_LOG_LEVEL", "debug")
    monkeypatch.setenv("PAGE_STUDIO_COMPONENT_NAME", "Landing")
    config = get_config()
    assert config.history_limit == 25
    assert config.log_level == "DEBUG"
    assert config.component_name == "Landing"


def test_zero_limit_means_unbounded():
    assert StudioConfig(history_limit=0).history_limit is None
    assert StudioConfig(history_limit="0").history_limit is None


def test_log_level_normalised():
    config = StudioConfig(log_level=" warning ")
    assert config.log_level == "WARNING"
    configure_logging(config)
