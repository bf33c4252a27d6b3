import logging

import pytest

from landing.config import ConfigError, LoggingConfig, configure_logging, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "LANDING_SUBMISSION_MODE",
        "LANDING_WEBHOOK_URL",
        "LANDING_WEBHOOK_TIMEOUT",
        "LANDING_SIMULATED_DELAY_MS",
        "LANDING_LOG_LEVEL",
        "LANDING_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = load_config(setup_logging=False)
    assert config.submission.mode == "simulated"
    assert config.submission.simulated_delay_ms == 1500
    assert config.submission.webhook_url is None
    assert config.logging.level == logging.INFO
    assert config.logging.log_file is None


def test_webhook_mode(monkeypatch):
    monkeypatch.setenv("LANDING_SUBMISSION_MODE", "webhook")
    monkeypatch.setenv("LANDING_WEBHOOK_URL", "https://crm.example.com/hook")
    monkeypatch.setenv("LANDING_WEBHOOK_TIMEOUT", "2.5")
    config = load_config(setup_logging=False)
    assert config.submission.mode == "webhook"
    assert config.submission.webhook_timeout == 2.5


def test_webhook_mode_requires_url(monkeypatch):
    monkeypatch.setenv("LANDING_SUBMISSION_MODE", "webhook")
    with pytest.raises(ConfigError):
        load_config(setup_logging=False)


def test_invalid_values(monkeypatch):
    monkeypatch.setenv("LANDING_SUBMISSION_MODE", "carrier-pigeon")
    with pytest.raises(ConfigError):
        load_config(setup_logging=False)

    monkeypatch.setenv("LANDING_SUBMISSION_MODE", "simulated")
    monkeypatch.setenv("LANDING_SIMULATED_DELAY_MS", "rápido")
    with pytest.raises(ConfigError):
        load_config(setup_logging=False)

    monkeypatch.delenv("LANDING_SIMULATED_DELAY_MS")
    monkeypatch.setenv("LANDING_LOG_LEVEL", "verbose")
    with pytest.raises(ConfigError):
        load_config(setup_logging=False)


def test_configure_logging_replaces_own_handlers(tmp_path):
    config = LoggingConfig(level=logging.DEBUG, log_file=tmp_path / "logs" / "landing.log")

    logger = configure_logging(config, logger_name="landing.test_config")
    configure_logging(config, logger_name="landing.test_config")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert (tmp_path / "logs").is_dir()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_log_file_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("LANDING_LOG_LEVEL", "debug")
    monkeypatch.setenv("LANDING_LOG_FILE", str(tmp_path / "landing.log"))
    config = load_config(setup_logging=False)
    assert config.logging.level == logging.DEBUG
    assert config.logging.log_file == tmp_path / "landing.log"
