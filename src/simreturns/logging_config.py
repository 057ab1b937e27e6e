import logging
import logging.config
import os

from simreturns.config import Settings


def build_logging_config(log_dir: str = "logs", console_level: str = "INFO") -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": console_level,
            },
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "filename": os.path.join(log_dir, "simreturns.log"),
                "maxBytes": 10_485_760,
                "backupCount": 5,
                "formatter": "standard",
                "level": "DEBUG",
            },
        },
        "root": {
            "level": "DEBUG",
            "handlers": ["console", "file"],
        },
    }


def setup_logging(settings: Settings | None = None):
    if settings is None:
        settings = Settings()
    os.makedirs(settings.log_dir, exist_ok=True)
    logging.config.dictConfig(
        build_logging_config(settings.log_dir, settings.log_level.upper())
    )
