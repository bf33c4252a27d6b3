"""Configuration module for the ODuo landing pages."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import logging
import os

SUBMISSION_MODES = ("simulated", "webhook")


class ConfigError(ValueError):
    """Configuração inválida vinda do ambiente."""


@dataclass
class SubmissionConfig:
    """How validated leads reach the CRM."""

    mode: str = "simulated"
    webhook_url: Optional[str] = None
    webhook_timeout: float = 10.0
    simulated_delay_ms: int = 1500


@dataclass
class LoggingConfig:
    """Logging of the ``landing`` package (``LANDING_LOG_*``)."""

    level: int = logging.INFO
    fmt: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
    log_file: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        level_name = os.getenv("LANDING_LOG_LEVEL", "INFO").strip().upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ConfigError(f"LANDING_LOG_LEVEL inválido: {level_name!r}")
        log_file = os.getenv("LANDING_LOG_FILE")
        return cls(level=level, log_file=Path(log_file).expanduser() if log_file else None)


@dataclass
class AppConfig:
    """Consolidated application configuration."""

    submission: SubmissionConfig = field(default_factory=SubmissionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _env_number(env_var: str, default: float, cast=float):
    raw = os.getenv(env_var)
    if raw is None or not raw.strip():
        return cast(default)
    try:
        return cast(raw)
    except ValueError:
        raise ConfigError(f"{env_var} deve ser numérico: {raw!r}") from None


def _build_submission_config() -> SubmissionConfig:
    mode = os.getenv("LANDING_SUBMISSION_MODE", "simulated").strip().lower()
    if mode not in SUBMISSION_MODES:
        raise ConfigError(f"LANDING_SUBMISSION_MODE inválido: {mode!r}")

    webhook_url = os.getenv("LANDING_WEBHOOK_URL") or None
    if mode == "webhook" and not webhook_url:
        raise ConfigError("LANDING_WEBHOOK_URL não configurado para o modo webhook")

    return SubmissionConfig(
        mode=mode,
        webhook_url=webhook_url,
        webhook_timeout=_env_number("LANDING_WEBHOOK_TIMEOUT", 10.0),
        simulated_delay_ms=_env_number("LANDING_SIMULATED_DELAY_MS", 1500, int),
    )


_HANDLER_MARK = "_landing_handler"


def configure_logging(logging_config: LoggingConfig, logger_name: str = "landing") -> logging.Logger:
    """Attach handlers to the package logger.

    Streamlit owns the root logger and reruns page scripts on every
    interaction, so handlers installed by a previous run are replaced.
    """

    logger = logging.getLogger(logger_name)
    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_MARK, False)]:
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logging_config.log_file:
        logging_config.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(logging_config.log_file, encoding="utf-8"))

    formatter = logging.Formatter(logging_config.fmt, datefmt=logging_config.datefmt)
    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARK, True)
        logger.addHandler(handler)
    logger.setLevel(logging_config.level)
    logger.propagate = False
    return logger


def load_config(*, setup_logging: bool = True) -> AppConfig:
    """Load application configuration from environment variables and defaults."""

    config = AppConfig(
        submission=_build_submission_config(),
        logging=LoggingConfig.from_env(),
    )
    if setup_logging:
        configure_logging(config.logging)
    return config


__all__ = [
    "AppConfig",
    "ConfigError",
    "LoggingConfig",
    "SubmissionConfig",
    "configure_logging",
    "load_config",
]
