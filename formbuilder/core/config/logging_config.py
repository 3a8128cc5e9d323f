import logging.config
import os

from formbuilder.core.config.settings import Settings


def setup_logging(settings: Settings):
    """Configure logging settings for the application"""
    handlers = ["console"]
    error_handlers = ["console"]

    LOGGING_CONFIG = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "fmt": "%(asctime)s %(name)s %(levelname)s %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "": {  # Root logger
                "handlers": handlers,
                "level": settings.LOG_LEVEL,
            },
            "formbuilder": {
                "handlers": handlers,
                "level": settings.LOG_LEVEL,
                "propagate": False,
            },
            "formbuilder.errors": {
                "handlers": error_handlers,
                "level": "ERROR",
                "propagate": False,
            },
        },
    }

    if settings.LOG_TO_FILE:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        LOGGING_CONFIG["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "json",
            "filename": os.path.join(settings.LOG_DIR, "app.log"),
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
        }
        LOGGING_CONFIG["handlers"]["error_file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "json",
            "filename": os.path.join(settings.LOG_DIR, "error.log"),
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
        }
        handlers.append("file")
        error_handlers.append("error_file")

    logging.config.dictConfig(LOGGING_CONFIG)
    return logging.getLogger("formbuilder")
